import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure le logger racine (stdout). Appelée une fois par create_app().
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # pas de doublons si create_app() est appelée plusieurs fois (tests)
    for handler in root.handlers:
        if getattr(handler, "_flashcards", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._flashcards = True  # type: ignore[attr-defined]
    root.addHandler(handler)
