"""Enveloppe standard des réponses de succès: `{status, message, data}`."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from agri_calendar.core.http_constants import HTTP_OK

DEFAULT_MESSAGE = "Data retrieved successfully"


def success(data: Any, message: str = DEFAULT_MESSAGE, status_code: int = HTTP_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": True, "message": message, "data": jsonable_encoder(data)},
    )
