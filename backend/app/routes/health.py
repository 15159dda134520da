import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import crud, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("", response_model=schemas.OkResponse)
def health() -> schemas.OkResponse:
    return schemas.OkResponse(ok=True)


@router.get("/db", response_model=schemas.DbHealth)
def database_health(db: Session = Depends(get_db)):
    try:
        now = crud.database_now(db)
    except SQLAlchemyError as exc:
        logger.error("Database health check failed: %s", exc)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})

    return schemas.DbHealth(ok=True, now=now)
