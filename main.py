"""
Lance le serveur HTTP.
Run: python main.py   (ou: uvicorn app.main:app)
"""
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import get_settings


if __name__ == "__main__":
    settings = get_settings()
    host, port = settings.listen_address()

    uvicorn.run(
        "app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
