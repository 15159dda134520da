from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .database import Base

SIDES = ("local", "visitante")
CARD_TYPES = ("amarilla", "roja")
# Largest value a 32-bit INTEGER column holds.
MAX_DB_INT = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Match(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)

    equipo_local = Column(Text, nullable=False)
    equipo_visitante = Column(Text, nullable=False)

    goles_favor_loc = Column(Integer, default=0, nullable=False)
    goles_favor_vis = Column(Integer, default=0, nullable=False)

    cancha = Column(Text, nullable=False)
    fecha = Column(Text, nullable=False, index=True)
    hora = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    goals = relationship("Goal", back_populates="match", cascade="all, delete-orphan")
    cards = relationship("Card", back_populates="match", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("goles_favor_loc >= 0", name="ck_match_goles_favor_loc_nonnegative"),
        CheckConstraint("goles_favor_vis >= 0", name="ck_match_goles_favor_vis_nonnegative"),
    )


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)

    team = Column(String(16), nullable=False)
    jugador = Column(Text, nullable=False)
    minuto = Column(Integer, nullable=False)
    penalty = Column(Boolean, default=False, nullable=False)
    own_goal = Column(Boolean, default=False, nullable=False)

    match = relationship("Match", back_populates="goals")

    __table_args__ = (
        CheckConstraint("team in ('local', 'visitante')", name="ck_goal_team_valid"),
        CheckConstraint("minuto >= 0", name="ck_goal_minuto_nonnegative"),
    )


class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)

    team = Column(String(16), nullable=False)
    jugador = Column(Text, nullable=False)
    minuto = Column(Integer, nullable=False)
    tipo = Column(String(16), nullable=False)

    match = relationship("Match", back_populates="cards")

    __table_args__ = (
        CheckConstraint("team in ('local', 'visitante')", name="ck_card_team_valid"),
        CheckConstraint("tipo in ('amarilla', 'roja')", name="ck_card_tipo_valid"),
        CheckConstraint("minuto >= 0", name="ck_card_minuto_nonnegative"),
    )
