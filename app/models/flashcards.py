from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Flashcard(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    prompt: str = Field(..., description="Question / recto")
    answer: Optional[str] = Field(default=None, description="Réponse / verso (peut être vide)")

    @property
    def has_answer(self) -> bool:
        return bool(self.answer)


class FlashcardCreateIn(BaseModel):
    prompt: str = ""
    answer: str = ""
