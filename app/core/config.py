from functools import lru_cache
from typing import Tuple

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Base
    APP_ENV: str = "dev"  # dev | test | prod
    APP_NAME: str = "Flashcards"
    APP_VERSION: str = "0.1.0"

    # HTTP: "host:port", ":port" or "port"
    # host vide -> 127.0.0.1 seulement ; "0.0.0.0:8080" pour toutes les interfaces
    PORT: str = ":8080"

    # Database
    DATABASE_URL: str = "sqlite:///./flashcards.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False
    CREATE_TABLES: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    def listen_address(self) -> Tuple[str, int]:
        return parse_listen_address(self.PORT)


def parse_listen_address(value: str, default_host: str = "127.0.0.1") -> Tuple[str, int]:
    """
    Découpe une adresse d'écoute ("localhost:8080", ":8080" ou "8080")
    en (host, port).
    """
    value = (value or "").strip()
    if not value:
        raise ValueError("empty listen address")

    host, sep, port = value.rpartition(":")
    if not sep:
        host, port = "", value

    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"invalid port in listen address {value!r}") from None
    if not 0 < port_number < 65536:
        raise ValueError(f"port out of range in listen address {value!r}")

    return host or default_host, port_number


@lru_cache
def get_settings() -> Settings:
    return Settings()
