"""
Données initiales: 4 saisons, 12 étoiles ancrées sur l'année courante.

Les étoiles existantes sont remplacées à chaque exécution; les saisons sont
créées si absentes (clé: nom).
"""

from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from agri_calendar.infra.models import SeasonORM, StarORM

log = structlog.get_logger(__name__)

# (nom, couleur, icône, durée, ordre)
SEASONS = [
    ("Winter", "#4A90D9", "snowflake", "December - February", 1),
    ("Spring", "#7CB342", "leaf", "March - May", 2),
    ("Summer", "#FFB74D", "sun", "June - August", 3),
    ("Autumn", "#E57373", "wind", "September - November", 4),
]

# (saison, nom, (mois, jour) début, (mois, jour) fin)
STARS = [
    ("Winter", "الشرطان", (1, 6), (1, 19)),
    ("Winter", "البلدة", (1, 20), (2, 2)),
    ("Winter", "سعد الذابح", (2, 3), (2, 16)),
    ("Spring", "سعد بلع", (3, 17), (3, 30)),
    ("Spring", "سعد السعود", (4, 1), (4, 13)),
    ("Spring", "سعد الأخبية", (4, 14), (4, 26)),
    ("Summer", "الفرع المقدم", (6, 22), (7, 5)),
    ("Summer", "الفرع المؤخر", (7, 6), (7, 19)),
    ("Summer", "الزبرة", (7, 20), (8, 2)),
    ("Autumn", "الصرفة", (9, 17), (9, 30)),
    ("Autumn", "العواء", (10, 1), (10, 13)),
    ("Autumn", "السماك", (10, 14), (10, 26)),
]


def seed_calendar(session: Session, year: int | None = None) -> dict[str, int]:
    """Insère saisons et étoiles pour `year` (année courante par défaut)."""
    year = year or datetime.now().year
    season_ids: dict[str, int] = {}
    for name, color, icon, duration, order in SEASONS:
        season = session.execute(
            select(SeasonORM).where(SeasonORM.name == name)
        ).scalar_one_or_none()
        if season is None:
            season = SeasonORM(
                name=name, color_hex=color, icon_name=icon, duration=duration, sort_order=order
            )
            session.add(season)
            session.flush()
        season_ids[name] = season.id

    session.execute(delete(StarORM))
    for season_name, name, (sm, sd), (em, ed) in STARS:
        session.add(
            StarORM(
                season_id=season_ids[season_name],
                name=name,
                start_date=datetime(year, sm, sd),
                end_date=datetime(year, em, ed),
                description=None,
                weather_info=None,
                agricultural_info=[],
                tips=[],
            )
        )
    session.flush()
    log.info("seed_calendar_done", year=year, seasons=len(season_ids), stars=len(STARS))
    return {"seasons": len(season_ids), "stars": len(STARS)}
