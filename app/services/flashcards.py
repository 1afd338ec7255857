import logging
from typing import List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import BackendError
from app.db.models import Flashcard as FlashcardRow
from app.models.flashcards import Flashcard, FlashcardCreateIn

logger = logging.getLogger(__name__)


class FlashcardService:
    """
    Accès à la table flashcards : une requête SQL par opération.
    Toute erreur SQLAlchemy remonte en BackendError.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_flashcards(self) -> List[Flashcard]:
        try:
            rows = self.db.execute(select(FlashcardRow).order_by(FlashcardRow.id)).scalars().all()
        except SQLAlchemyError as e:
            raise BackendError.wrap(e) from e
        return [Flashcard.model_validate(r) for r in rows]

    def create_flashcard(self, payload: FlashcardCreateIn) -> Flashcard:
        if not payload.prompt.strip():
            raise BackendError("prompt is required")

        row = FlashcardRow(prompt=payload.prompt, answer=payload.answer)
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise BackendError.wrap(e) from e

        logger.info("Created flashcard id=%s", row.id)
        return Flashcard.model_validate(row)

    def update_answer(self, flashcard_id: int, answer: str) -> int:
        """
        Remplace la réponse d'une carte. Retourne le nombre de lignes
        modifiées (0 si l'id n'existe pas).
        """
        stmt = (
            update(FlashcardRow)
            .where(FlashcardRow.id == flashcard_id)
            .values(answer=answer)
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            self.db.rollback()
            raise BackendError.wrap(e) from e

        logger.info("Updated answer of flashcard id=%s (rows=%s)", flashcard_id, result.rowcount)
        return result.rowcount
