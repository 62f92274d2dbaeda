"""Top-level validate-docs configuration."""

import json
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._defaults import DEFAULT_CONFIG_FILENAME, DEFAULT_EXCLUDE, DEFAULT_EXTENSIONS, DEFAULT_SEPARATOR
from .LogConfig import LogConfig


class DocsConfig(BaseModel):
    """Settings for one validation run. Every field has a default."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS), description="File extensions to load")
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE), description="Root-relative globs to skip")
    ignore_patterns: list[str] = Field(default_factory=list, description="Regexes; matching targets are never checked")
    separator: str = Field(DEFAULT_SEPARATOR, description="Regex for a line that starts a new sub-document")
    workers: int = Field(1, ge=1, description="Worker threads for extraction and resolution")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]

    @field_validator("ignore_patterns")
    @classmethod
    def _compile_patterns(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid regex {pattern!r}: {e}") from e
        return value

    @field_validator("separator")
    @classmethod
    def _compile_separator(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    @classmethod
    def get_config_path(cls, root: Path) -> Path:
        """Default config location inside the corpus root."""
        return root / DEFAULT_CONFIG_FILENAME

    @classmethod
    def load(cls, path: Path) -> "DocsConfig":
        """Load and validate config from a JSON file.

        Raises:
            ValueError: If the config file is missing or unreadable, is not valid JSON, or fails validation
        """
        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def discover(cls, root: Path, explicit: Path | None = None) -> "DocsConfig":
        """Load ``explicit`` if given, else the root's config file if present, else defaults."""
        if explicit is not None:
            return cls.load(explicit)
        default_path = cls.get_config_path(root)
        if default_path.is_file():
            return cls.load(default_path)
        return cls()
