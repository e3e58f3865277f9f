"""Runtime configuration: settings schema and notedoc.yaml loader.

The conversion functions never read configuration themselves; callers
load a ``Settings`` once (CLI start-up, service boot) and pass it to the
public API.  ``None`` everywhere means the defaults below.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from notedoc.grammar.tags import MAX_NESTING_DEPTH

CONFIG_FILE = "notedoc.yaml"
ENV_PREFIX = "NOTEDOC_"


class Settings(BaseModel):
    max_depth:       int = Field(default=MAX_NESTING_DEPTH, ge=1, description="Max nesting depth descended into by parse, build and serialization")
    table_detection: Literal["fail_open", "fail_closed"] = Field(default="fail_open", description="Answer reported when table detection fails internally")
    markup_fields:   list[str] = Field(default_factory=lambda: ["html", "markup"], description="Wrapper keys read as markup by the normalizer")
    log_level:       str = Field(default="WARNING", description="Logging level name used by the CLI")

    @field_validator("markup_fields", mode="before")
    @classmethod
    def _split_fields(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def fail_closed(self) -> bool:
        return self.table_detection == "fail_closed"


def load_config(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> Settings:
    """Load Settings from notedoc.yaml, then NOTEDOC_<FIELD> env vars, then non-None overrides.

    Raises
    ------
    ValueError
        If the YAML file cannot be parsed or does not hold a mapping.
    pydantic.ValidationError
        If a value is out of range.
    """
    config_path = Path(path) if path is not None else Path(CONFIG_FILE)
    data: dict[str, Any] = {}
    if config_path.exists():
        try:
            loaded = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid {config_path}: expected a mapping at top level")
        data = loaded

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
