"""
Routes d'authentification pour l'API.

Ce module fournit l'endpoint de connexion administrateur qui émet un JWT.
"""

from fastapi import APIRouter

from agri_calendar.api.deps import Auth
from agri_calendar.api.errors import unwrap
from agri_calendar.api.responses import success
from agri_calendar.api.schemas import LoginPayload

router = APIRouter(prefix="/v1/auth", tags=["auth"])


@router.post("/login")
def login(p: LoginPayload, auth: Auth):
    """Authentifie un administrateur et retourne `{token, admin}`."""
    result = unwrap(auth.login(str(p.email), p.password))
    return success(result, "Login successful")
