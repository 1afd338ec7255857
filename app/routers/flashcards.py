import logging
import re
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from app.core.deps import get_flashcard_service
from app.core.errors import BackendError
from app.models.flashcards import FlashcardCreateIn
from app.services.flashcards import FlashcardService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["flashcards"])

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# chiffres ASCII avec signe optionnel, dans les bornes d'un entier signé 64 bits
ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_ID = 2**63 - 1


def parse_flashcard_id(value: str) -> int:
    if not ID_PATTERN.fullmatch(value):
        raise BackendError(f"invalid flashcard id {value!r}")
    card_id = int(value)
    if not -MAX_ID - 1 <= card_id <= MAX_ID:
        raise BackendError(f"flashcard id {value!r} out of range")
    return card_id


def render(request: Request, name: str, context: dict) -> HTMLResponse:
    # le rendu se fait à la construction de la réponse
    try:
        return templates.TemplateResponse(request, name, context)
    except TemplateError as e:
        raise BackendError.wrap(e) from e


@router.get("/", response_class=HTMLResponse)
def home_page(request: Request, service: FlashcardService = Depends(get_flashcard_service)):
    flashcards = service.list_flashcards()
    return render(request, "index.html", {"flashcards": flashcards})


@router.post("/flashcards", response_class=HTMLResponse)
def create_flashcard(
    request: Request,
    prompt: str = Form(""),
    answer: str = Form(""),
    service: FlashcardService = Depends(get_flashcard_service),
):
    created = service.create_flashcard(FlashcardCreateIn(prompt=prompt, answer=answer))
    return render(request, "_flashcard.html", {"flashcard": created})


@router.patch("/flashcards/{flashcard_id}", response_class=PlainTextResponse)
def patch_flashcard(
    flashcard_id: str,
    answer: str = Form(""),
    service: FlashcardService = Depends(get_flashcard_service),
):
    card_id = parse_flashcard_id(flashcard_id)

    count = service.update_answer(card_id, answer)
    return PlainTextResponse(f"updated rows: {count}")
