from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import MAX_DB_INT


class ORMBaseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


Side = Literal["local", "visitante"]
CardType = Literal["amarilla", "roja"]


class GoalWrite(BaseModel):
    team: Side
    jugador: str = Field(min_length=1)
    minuto: int = Field(ge=0, le=MAX_DB_INT)
    penalty: bool = False
    own_goal: bool = False

    @field_validator("penalty", "own_goal", mode="before")
    @classmethod
    def _as_flag(cls, value: object) -> bool:
        return bool(value)


class CardWrite(BaseModel):
    team: Side
    jugador: str = Field(min_length=1)
    minuto: int = Field(ge=0, le=MAX_DB_INT)
    tipo: CardType


class MatchWrite(BaseModel):
    equipo_local: str = Field(min_length=1)
    equipo_visitante: str = Field(min_length=1)
    goles_favor_loc: int = Field(default=0, ge=0, le=MAX_DB_INT)
    goles_favor_vis: int = Field(default=0, ge=0, le=MAX_DB_INT)
    cancha: str = Field(min_length=1)
    fecha: str = Field(min_length=1)
    hora: str = Field(min_length=1)

    goles: list[GoalWrite] = Field(default_factory=list)
    tarjetas: list[CardWrite] = Field(default_factory=list)

    @field_validator("goles_favor_loc", "goles_favor_vis", mode="before")
    @classmethod
    def _score_or_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("goles", "tarjetas", mode="before")
    @classmethod
    def _events_or_empty(cls, value: object) -> object:
        return [] if value is None else value


class GoalRead(ORMBaseModel):
    id: int
    team: Side
    jugador: str
    minuto: int
    penalty: bool
    own_goal: bool


class CardRead(ORMBaseModel):
    id: int
    team: Side
    jugador: str
    minuto: int
    tipo: CardType


class MatchBase(ORMBaseModel):
    id: int
    equipo_local: str
    equipo_visitante: str
    goles_favor_loc: int
    goles_favor_vis: int
    cancha: str
    fecha: str
    hora: str
    created_at: datetime | None = None


class MatchRead(MatchBase):
    goles: list[GoalRead] = Field(default_factory=list)
    tarjetas: list[CardRead] = Field(default_factory=list)


class MatchCounts(BaseModel):
    goles: int = 0
    tarjetas: int = 0


class MatchSummary(MatchBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    counts: MatchCounts = Field(alias="_counts")


class OkResponse(BaseModel):
    ok: bool = True


class DbHealth(BaseModel):
    ok: bool
    now: datetime | str | None = None
