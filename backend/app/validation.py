"""Field-level checks for match payloads.

``validate_match_payload`` runs before any database work and reports the
first problem it finds as a short message suitable for a 400 response.
"""

from typing import Any

from .models import CARD_TYPES, MAX_DB_INT, SIDES

REQUIRED_FIELDS: tuple[str, ...] = ("equipo_local", "equipo_visitante", "cancha", "fecha", "hora")
SCORE_FIELDS: tuple[str, ...] = ("goles_favor_loc", "goles_favor_vis")


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_DB_INT


def _is_filled_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _validate_event(entry: Any, collection: str) -> str | None:
    if not isinstance(entry, dict):
        return f"Each entry in {collection} must be an object."
    if entry.get("team") not in SIDES:
        return f"Invalid team in {collection} (expected 'local' or 'visitante')."
    if not _is_filled_text(entry.get("jugador")):
        return f"jugador is required in {collection}."
    if not _is_non_negative_int(entry.get("minuto")):
        return f"Invalid minuto in {collection}."
    return None


def validate_match_payload(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return "Match payload must be a JSON object."

    for field in REQUIRED_FIELDS:
        if not _is_filled_text(payload.get(field)):
            return f"Missing field: {field}"

    for field in SCORE_FIELDS:
        value = payload.get(field)
        if value is not None and not _is_non_negative_int(value):
            return f"{field} must be a non-negative integer."

    for collection in ("goles", "tarjetas"):
        value = payload.get(collection)
        if value is not None and not isinstance(value, list):
            return f"{collection} must be an array."

    for goal in payload.get("goles") or []:
        error = _validate_event(goal, "goles")
        if error:
            return error

    for card in payload.get("tarjetas") or []:
        error = _validate_event(card, "tarjetas")
        if error:
            return error
        if card.get("tipo") not in CARD_TYPES:
            return "Invalid tipo in tarjetas (expected 'amarilla' or 'roja')."

    return None
