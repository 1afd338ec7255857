from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.database import Base


# ============================================================
# FLASHCARDS
# ============================================================


class Flashcard(Base):
    __tablename__ = "flashcards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    # pas encore de réponse possible
    answer: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Flashcard id={self.id} prompt={self.prompt!r}>"
