# config.py

"""Settings for the catering back-office.

Defaults live in ``config.json`` beside this module. Any field can be
overridden by an environment variable of the same name in any case, e.g.
``CURRENCY_SYMBOL=$`` or ``storage_backend=sqlalchemy``.
"""

from __future__ import annotations

import json
import os
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILE = Path(__file__).with_name("config.json")


class StorageBackend(str, Enum):
    """Where catering records are kept.

    ``MEMORY`` is lost on restart; ``SQLALCHEMY`` writes to ``database_url``.
    """

    MEMORY = "memory"
    SQLALCHEMY = "sqlalchemy"


class Settings(BaseSettings):
    """Display, pricing-default, lifecycle and storage settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    currency_symbol: str = "₹"
    # pre-filled on new quotes only; the calculator treats a missing value as 0
    default_gst_percent: Decimal = Decimal("5")
    default_discount_percent: Decimal = Decimal("0")
    initial_quote_status: str = "draft"
    default_approver: str = "Admin"
    storage_backend: StorageBackend = StorageBackend.MEMORY
    database_url: str = "sqlite://"
    seed_demo_data: bool = True
    log_level: str = "INFO"


def _file_values() -> dict[str, Any]:
    if not CONFIG_FILE.exists():
        return {}
    return json.loads(CONFIG_FILE.read_text(encoding="utf-8"))


def _env_values() -> dict[str, str]:
    return {
        key.lower(): value
        for key, value in os.environ.items()
        if key.lower() in Settings.model_fields
    }


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings, environment taking precedence over the file.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """

    return Settings(**{**_file_values(), **_env_values()})
