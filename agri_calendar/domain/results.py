"""
Types d'erreurs métier et résultats étiquetés.

Les services ne lèvent pas d'exception pour les cas attendus (ligne absente,
contrainte violée): ils renvoient un `Outcome` portant soit une valeur, soit un
`ErrorKind`. La couche HTTP traduit le type d'erreur en code de statut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Catégories d'erreurs exposées par l'API."""

    VALIDATION = "VALIDATION"
    AUTH = "AUTH"
    NOT_FOUND = "NOT_FOUND"
    CONSTRAINT = "CONSTRAINT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Résultat d'une opération: `value` si `error` est None."""

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""
    details: dict[str, Any] | None = field(default=None)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(
        cls, kind: ErrorKind, message: str, details: dict[str, Any] | None = None
    ) -> Outcome[T]:
        return cls(error=kind, message=message, details=details)
