"""
Configuration — lue depuis l'environnement (SITE_BUILDER_*), mise en cache.

SITE_BUILDER_LOG_LEVEL             → niveau logging (défaut INFO)
SITE_BUILDER_RICH_TEXT_MAX_LENGTH  → taille max d'un contenu riche avant sanitization
SITE_BUILDER_ALLOWED_PROTOCOLS     → protocoles autorisés dans les liens du contenu riche
"""
import logging
import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field


class Settings(BaseModel):
    log_level: str = "INFO"
    rich_text_max_length: int = Field(default=100_000, ge=1)
    allowed_protocols: List[str] = Field(default_factory=lambda: ["http", "https", "mailto", "tel"])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Construit les settings depuis os.environ (une seule fois par process)."""
    protocols = os.getenv("SITE_BUILDER_ALLOWED_PROTOCOLS", "")
    values = {
        "log_level": os.getenv("SITE_BUILDER_LOG_LEVEL", "INFO").upper(),
        "rich_text_max_length": int(os.getenv("SITE_BUILDER_RICH_TEXT_MAX_LENGTH", "100000")),
    }
    if protocols:
        values["allowed_protocols"] = [p.strip().lower() for p in protocols.split(",") if p.strip()]
    return Settings(**values)


def configure_logging() -> None:
    """Logging applicatif — appelé par l'hôte (app FastAPI, script de publication)."""
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
