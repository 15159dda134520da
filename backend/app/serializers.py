from . import models, schemas


def match_to_read(
    match: models.Match,
    goals: list[models.Goal],
    cards: list[models.Card],
) -> schemas.MatchRead:
    return schemas.MatchRead(
        id=match.id,
        equipo_local=match.equipo_local,
        equipo_visitante=match.equipo_visitante,
        goles_favor_loc=match.goles_favor_loc,
        goles_favor_vis=match.goles_favor_vis,
        cancha=match.cancha,
        fecha=match.fecha,
        hora=match.hora,
        created_at=match.created_at,
        goles=[schemas.GoalRead.model_validate(goal) for goal in goals],
        tarjetas=[schemas.CardRead.model_validate(card) for card in cards],
    )


def match_to_summary(match: models.Match, goal_count: int, card_count: int) -> schemas.MatchSummary:
    return schemas.MatchSummary(
        id=match.id,
        equipo_local=match.equipo_local,
        equipo_visitante=match.equipo_visitante,
        goles_favor_loc=match.goles_favor_loc,
        goles_favor_vis=match.goles_favor_vis,
        cancha=match.cancha,
        fecha=match.fecha,
        hora=match.hora,
        created_at=match.created_at,
        counts=schemas.MatchCounts(goles=goal_count, tarjetas=card_count),
    )
