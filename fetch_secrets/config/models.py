"""Pydantic models describing a scan run."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "fetch-secrets/2.0"


class OutputFormat(str, Enum):
    """Result renderings supported by the formatters."""

    TEXT = "text"
    JSON = "json"
    CSV = "csv"


class ScanSettings(BaseModel):
    """Runtime controls for one scan."""

    threads: int = Field(default=10, gt=0)
    output_format: OutputFormat = OutputFormat.TEXT
    output_file: Path | None = None
    colorless: bool = False
    silent: bool = False
    mask_visible: int | None = Field(default=None, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("output_format", mode="before")
    @classmethod
    def _coerce_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "txt":
                return OutputFormat.TEXT
        return value

    @field_validator("output_file", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Path | None:
        if value in (None, ""):
            return None
        return Path(value)


__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "OutputFormat", "ScanSettings"]
