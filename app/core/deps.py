from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.db.database import Database
from app.services.flashcards import FlashcardService


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Une Session (donc une connexion du pool) par requête.
    """
    yield from database.sessions()


def get_flashcard_service(db: Session = Depends(get_db)) -> FlashcardService:
    return FlashcardService(db)
