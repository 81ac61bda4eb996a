"""
Lance le serveur uvicorn avec l'hôte et le port des settings.
"""

import sys
from pathlib import Path

SYS_ROOT = Path(__file__).resolve().parents[1]
if str(SYS_ROOT) not in sys.path:
    sys.path.append(str(SYS_ROOT))

import uvicorn  # noqa: E402

from agri_calendar.core.settings import get_settings  # noqa: E402


def main():
    settings = get_settings()
    uvicorn.run(
        "agri_calendar.app.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.APP_ENV == "dev",
    )


if __name__ == "__main__":
    main()
