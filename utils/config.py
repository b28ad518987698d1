# utils/config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from utils.errors import ConfigMissing

ENV_PRODUCTION = "PROD"
ENV_DEVELOPMENT = "DEV"

REQUIRED_KEYS = ("TELEGRAM_BOT_TOKEN", "SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET")


@dataclass(frozen=True)
class Settings:
    telegram_token: str
    spotify_client_id: str
    spotify_client_secret: str
    environment: str = ENV_DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == ENV_PRODUCTION


def _require(environ: Mapping[str, str], key: str) -> str:
    value = (environ.get(key) or "").strip()
    if not value:
        raise ConfigMissing(key)
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Reads settings from the environment (and .env when reading os.environ)."""
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    environment = (environ.get("ENVIRONMENT") or ENV_DEVELOPMENT).strip().upper()
    if environment != ENV_PRODUCTION:
        environment = ENV_DEVELOPMENT

    return Settings(
        telegram_token=_require(environ, "TELEGRAM_BOT_TOKEN"),
        spotify_client_id=_require(environ, "SPOTIFY_CLIENT_ID"),
        spotify_client_secret=_require(environ, "SPOTIFY_CLIENT_SECRET"),
        environment=environment,
    )
