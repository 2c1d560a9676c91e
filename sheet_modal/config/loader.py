from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.card import Card
from ..models.modal_content import DESCRIPTION_FALLBACK, PLACEHOLDER

"""Config loader.

Responsibilities:
- Load the YAML config (default ``config/sheets.yml``)
- Validate it against ``config_schema.json`` shipped next to this module
- Apply defaults (no request timeout, fallback texts)
- Let ``SHEETS_CSV_URL`` from the environment override ``csv_url``
"""

__all__ = [
    "ConfigError",
    "SheetConfig",
    "load_config",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_SHEETS_CSV_URL",
    "CSV_URL_ENV",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/sheets.yml")
CSV_URL_ENV = "SHEETS_CSV_URL"

DEFAULT_SHEETS_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/"
    "1gcciGJgrT7NQNj4qWOMtS7C854nDXCi2XVwxTZmhGC8/export?format=csv"
)


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class SheetConfig:
    csv_url: str
    request_timeout: float | None = None  # None: wait indefinitely
    description_fallback: str = DESCRIPTION_FALLBACK
    placeholder: str = PLACEHOLDER
    cards: list[Card] = field(default_factory=list)


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails validation (missing ``csv_url``, wrong types,
            unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> SheetConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    env_url = os.getenv(CSV_URL_ENV)
    if env_url:
        data["csv_url"] = env_url

    _validate_config_schema(data)

    cards = [
        Card(
            key=c["key"],
            image_src=c.get("image_src"),
            image_alt=c.get("image_alt"),
        )
        for c in data.get("cards", [])
    ]
    return SheetConfig(
        csv_url=data["csv_url"],
        request_timeout=data.get("request_timeout"),
        description_fallback=data.get("description_fallback", DESCRIPTION_FALLBACK),
        placeholder=data.get("placeholder", PLACEHOLDER),
        cards=cards,
    )
