"""SQLAlchemy models for the persistence layer (seasons, stars, occasions, prayers, admins).

Les dates de début/fin des étoiles sont stockées comme instants UTC naïfs.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def utcnow() -> datetime:
    """Instant courant en UTC, sans tzinfo (format de stockage)."""
    return datetime.now(UTC).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Classe de base pour tous les modèles SQLAlchemy."""

    metadata = MetaData()


class SeasonORM(Base):
    """Saison agricole (hiver, printemps...)."""

    __tablename__ = "seasons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    color_hex = Column(String(7), nullable=False)
    icon_name = Column(String(50), nullable=False)
    duration = Column(String(100), nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    stars = relationship(
        "StarORM", back_populates="season", order_by="StarORM.start_date"
    )


class StarORM(Base):
    """Étoile (manzila) avec sa plage de dates grégoriennes."""

    __tablename__ = "stars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    season_id = Column(
        Integer, ForeignKey("seasons.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    start_date = Column(DateTime, nullable=False, index=True)
    end_date = Column(DateTime, nullable=False)
    description = Column(Text, nullable=True)
    weather_info = Column(Text, nullable=True)
    agricultural_info = Column(JSON, nullable=False, default=list)
    tips = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    season = relationship("SeasonORM", back_populates="stars")


class OccasionORM(Base):
    """Occasion religieuse fixée par un jour/mois hégirien (sans année)."""

    __tablename__ = "occasions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    hijri_month = Column(Integer, nullable=False)
    hijri_day = Column(Integer, nullable=False)
    title = Column(String(500), nullable=False)
    prayer_title = Column(String(500), nullable=False)
    prayer_text = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class PrayerORM(Base):
    """Invocation (texte libre)."""

    __tablename__ = "prayers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class AdminORM(Base):
    """Compte administrateur."""

    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
