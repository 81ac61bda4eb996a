"""Normalisation des paramètres de pagination."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from agri_calendar.core.http_constants import MAX_PAGE_SIZE


@dataclass(frozen=True)
class PageRequest:
    """Page (>= 1) et taille (1..100) après bornage."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def clamp_page(page: int | None, limit: int | None, default_limit: int) -> PageRequest:
    """Borne `page` à 1 minimum et `limit` dans [1, MAX_PAGE_SIZE]."""
    p = max(1, page if page is not None else 1)
    lim = min(MAX_PAGE_SIZE, max(1, limit if limit is not None else default_limit))
    return PageRequest(page=p, limit=lim)


@dataclass
class Page:
    """Résultat paginé."""

    items: list[dict[str, Any]]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    def as_dict(self, key: str) -> dict[str, Any]:
        return {
            key: self.items,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }
