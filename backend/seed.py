from __future__ import annotations

import argparse
import logging

from app import crud, models, schemas
from app.database import Base, SessionLocal, engine, init_db
from app.validation import validate_match_payload

logger = logging.getLogger("seed")

DEMO_MATCHES = [
    {
        "equipo_local": "Los Halcones",
        "equipo_visitante": "Deportivo Barrio Norte",
        "goles_favor_loc": 2,
        "goles_favor_vis": 1,
        "cancha": "Cancha Municipal 1",
        "fecha": "2024-03-02",
        "hora": "10:00",
        "goles": [
            {"team": "local", "jugador": "Matias Gomez", "minuto": 12},
            {"team": "visitante", "jugador": "Lucas Ferreyra", "minuto": 38, "penalty": True},
            {"team": "local", "jugador": "Nicolas Diaz", "minuto": 81},
        ],
        "tarjetas": [
            {"team": "visitante", "jugador": "Pablo Rios", "minuto": 44, "tipo": "amarilla"},
            {"team": "local", "jugador": "Matias Gomez", "minuto": 70, "tipo": "amarilla"},
        ],
    },
    {
        "equipo_local": "Atletico Sur",
        "equipo_visitante": "Los Halcones",
        "goles_favor_loc": 0,
        "goles_favor_vis": 0,
        "cancha": "Polideportivo Sur",
        "fecha": "2024-03-09",
        "hora": "16:30",
        "goles": [],
        "tarjetas": [
            {"team": "local", "jugador": "Ezequiel Paz", "minuto": 55, "tipo": "roja"},
        ],
    },
    {
        "equipo_local": "Deportivo Barrio Norte",
        "equipo_visitante": "Atletico Sur",
        "goles_favor_loc": 1,
        "goles_favor_vis": 3,
        "cancha": "Cancha Municipal 2",
        "fecha": "2024-03-16",
        "hora": "11:15",
        "goles": [
            {"team": "visitante", "jugador": "Ezequiel Paz", "minuto": 5},
            {"team": "local", "jugador": "Lucas Ferreyra", "minuto": 27},
            {"team": "visitante", "jugador": "Pablo Rios", "minuto": 60, "own_goal": True},
            {"team": "visitante", "jugador": "Tomas Vera", "minuto": 88},
        ],
        "tarjetas": [],
    },
]


def reset_database() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed(reset: bool = False) -> int:
    init_db()
    if reset:
        reset_database()

    db = SessionLocal()
    try:
        if db.query(models.Match.id).first() is not None:
            logger.info("Database already has matches, nothing to seed")
            return 0

        for raw in DEMO_MATCHES:
            error = validate_match_payload(raw)
            if error:
                raise ValueError(error)
            crud.create_match(db, schemas.MatchWrite.model_validate(raw))
    finally:
        db.close()

    return len(DEMO_MATCHES)


def main() -> None:
    parser = argparse.ArgumentParser(description="Load demo matches into the results database.")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    created = seed(reset=args.reset)
    logger.info("Seeded %d matches", created)


if __name__ == "__main__":
    main()
