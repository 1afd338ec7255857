from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.core.deps import get_database, get_settings_dep
from app.core.errors import BackendError
from app.db.database import Database

router = APIRouter(tags=["system"])

@router.get("/health")
def health(s: Settings = Depends(get_settings_dep), database: Database = Depends(get_database)):
    try:
        database.ping()
    except SQLAlchemyError as e:
        raise BackendError.wrap(e) from e
    return {"status": "ok", "version": s.APP_VERSION, "database": "ok"}

@router.get("/version")
def version(s: Settings = Depends(get_settings_dep)):
    return {"name": s.APP_NAME, "version": s.APP_VERSION, "env": s.APP_ENV}
