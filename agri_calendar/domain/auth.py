"""
Module d'authentification et de gestion des tokens.

Ce module fournit les fonctions pour le hachage des mots de passe, la création et validation des
tokens JWT des administrateurs.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Hash de référence vérifié quand l'email est inconnu, pour un temps de réponse comparable.
_DUMMY_HASH = pwd_context.hash("not-a-real-password")


class TokenData(BaseModel):
    """Données contenues dans un token JWT admin."""

    sub: str
    email: str = ""


def normalize_email(email: str) -> str:
    return email.strip().lower()


def hash_password(p: str) -> str:
    """Hache un mot de passe en utilisant PBKDF2."""
    return pwd_context.hash(p)


def verify_password(p: str, h: str | None) -> bool:
    """Vérifie un mot de passe contre son hash.

    Sans hash (compte inconnu), un hash factice est tout de même vérifié et le
    résultat est toujours False.
    """
    if not h:
        pwd_context.verify(p, _DUMMY_HASH)
        return False
    try:
        return pwd_context.verify(p, h)
    except ValueError:
        return False


def create_access_token(
    secret: str, alg: str, expires_min: int, payload: dict[str, Any]
) -> str:
    """Crée un token JWT d'accès avec expiration."""
    to_encode = payload.copy()
    expire = datetime.now(UTC) + timedelta(minutes=expires_min)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=alg)


def decode_token(token: str, secret: str, alg: str) -> TokenData | None:
    """Décode et valide un token JWT.

    Signature invalide, token expiré, malformé ou sans `sub`: None.
    """
    try:
        data = jwt.decode(token, secret, algorithms=[alg])
        token_data = TokenData(**data)
    except (InvalidTokenError, ValidationError, TypeError):
        return None
    if not token_data.sub:
        return None
    return token_data
