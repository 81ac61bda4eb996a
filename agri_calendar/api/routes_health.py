"""
Endpoint de santé pour vérifier la disponibilité de l'API.

Expose `/health` (hors préfixe d'API) pour signaler l'état de l'application et
le type de stockage configuré.
"""

from fastapi import APIRouter

from agri_calendar.api.deps import ContainerDep

router = APIRouter(tags=["health"])


@router.get("/health")
def health(container: ContainerDep):
    """Vérifie la disponibilité de l'API et le backend de stockage."""
    return {
        "ok": True,
        "service": container.settings.APP_NAME,
        "storage": container.storage_backend,
    }
