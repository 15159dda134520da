import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models, schemas

logger = logging.getLogger(__name__)


def _goal_rows(payload: schemas.MatchWrite) -> list[models.Goal]:
    return [
        models.Goal(
            team=goal.team,
            jugador=goal.jugador,
            minuto=goal.minuto,
            penalty=goal.penalty,
            own_goal=goal.own_goal,
        )
        for goal in payload.goles
    ]


def _card_rows(payload: schemas.MatchWrite) -> list[models.Card]:
    return [
        models.Card(
            team=card.team,
            jugador=card.jugador,
            minuto=card.minuto,
            tipo=card.tipo,
        )
        for card in payload.tarjetas
    ]


def _apply_match_fields(match: models.Match, payload: schemas.MatchWrite) -> None:
    match.equipo_local = payload.equipo_local
    match.equipo_visitante = payload.equipo_visitante
    match.goles_favor_loc = payload.goles_favor_loc
    match.goles_favor_vis = payload.goles_favor_vis
    match.cancha = payload.cancha
    match.fecha = payload.fecha
    match.hora = payload.hora


def fetch_details(db: Session, match_id: int) -> tuple[list[models.Goal], list[models.Card]]:
    """Goals and cards of one match, ordered by minute then insertion id."""
    goals = (
        db.query(models.Goal)
        .filter(models.Goal.match_id == match_id)
        .order_by(models.Goal.minuto, models.Goal.id)
        .all()
    )
    cards = (
        db.query(models.Card)
        .filter(models.Card.match_id == match_id)
        .order_by(models.Card.minuto, models.Card.id)
        .all()
    )
    return goals, cards


def list_matches(db: Session) -> list[tuple[models.Match, int, int]]:
    """All matches, newest first, each with its goal and card counts."""
    goal_counts = (
        select(models.Goal.match_id, func.count(models.Goal.id).label("total"))
        .group_by(models.Goal.match_id)
        .subquery()
    )
    card_counts = (
        select(models.Card.match_id, func.count(models.Card.id).label("total"))
        .group_by(models.Card.match_id)
        .subquery()
    )

    rows = (
        db.query(
            models.Match,
            func.coalesce(goal_counts.c.total, 0),
            func.coalesce(card_counts.c.total, 0),
        )
        .outerjoin(goal_counts, goal_counts.c.match_id == models.Match.id)
        .outerjoin(card_counts, card_counts.c.match_id == models.Match.id)
        .order_by(models.Match.fecha.desc(), models.Match.hora.desc(), models.Match.id.desc())
        .all()
    )
    return [(match, int(goal_total), int(card_total)) for match, goal_total, card_total in rows]


def get_match_or_raise(db: Session, match_id: int) -> models.Match:
    # Ids outside the column range cannot exist; the driver would overflow on them.
    if not 1 <= match_id <= models.MAX_DB_INT:
        raise LookupError("Match not found.")

    match = db.get(models.Match, match_id)
    if not match:
        raise LookupError("Match not found.")
    return match


def create_match(db: Session, payload: schemas.MatchWrite) -> models.Match:
    match = models.Match()
    _apply_match_fields(match, payload)

    try:
        db.add(match)
        match.goals = _goal_rows(payload)
        match.cards = _card_rows(payload)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Creating match failed, transaction rolled back")
        raise

    logger.info(
        "Created match %s (%d goals, %d cards)",
        match.id,
        len(payload.goles),
        len(payload.tarjetas),
    )
    return match


def update_match(db: Session, match_id: int, payload: schemas.MatchWrite) -> models.Match:
    match = get_match_or_raise(db, match_id)

    try:
        _apply_match_fields(match, payload)
        # Replace semantics: delete-orphan drops every previously stored event.
        match.goals = _goal_rows(payload)
        match.cards = _card_rows(payload)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Updating match %s failed, transaction rolled back", match_id)
        raise

    logger.info(
        "Updated match %s (%d goals, %d cards)",
        match_id,
        len(payload.goles),
        len(payload.tarjetas),
    )
    return match


def delete_match(db: Session, match_id: int) -> None:
    match = get_match_or_raise(db, match_id)

    try:
        db.delete(match)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Deleting match %s failed, transaction rolled back", match_id)
        raise

    logger.info("Deleted match %s", match_id)


def database_now(db: Session) -> datetime:
    return db.execute(select(func.current_timestamp())).scalar_one()
