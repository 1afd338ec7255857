import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """
    Unique type d'erreur : une opération backend a échoué
    (base, rendu du template, paramètre mal formé...).
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def wrap(cls, exc: Exception) -> "BackendError":
        return cls(str(exc) or exc.__class__.__name__)


async def backend_error_handler(request: Request, exc: BackendError) -> PlainTextResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(
        f"internal server error: {exc.message}",
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
    )
