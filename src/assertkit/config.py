from __future__ import annotations

import os
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssertSettings(BaseModel):
    """Per-suite settings for the assertion helpers.

    Attributes:
        skips: Stack frames between the failing test statement and the
            public assertion call. 1 means the test calls the helper directly.
        temp_prefix: Name prefix for files made by ``create_file``.
        temp_dir: Directory for those files. ``None`` uses the platform
            temp directory. ``${VAR}`` and ``${VAR:-default}`` are expanded.
    """

    model_config = ConfigDict(extra="forbid")

    skips: int = Field(default=1, ge=0)
    temp_prefix: str = "example"
    temp_dir: str | None = None

    @field_validator("temp_prefix")
    @classmethod
    def prefix_is_a_plain_name(cls, v: str) -> str:
        if os.sep in v or (os.altsep and os.altsep in v):
            raise ValueError(f"temp_prefix '{v}' must not contain a path separator")
        return v

    @field_validator("temp_dir")
    @classmethod
    def expand_temp_dir(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception:
            # Variable is missing and has no default
            raise ValueError(f"temp_dir '{v}' references an unset environment variable")


def load_settings(path: Path) -> AssertSettings:
    """Load and validate assertion settings from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    settings = AssertSettings(**raw)

    # Resolve a relative temp_dir against the settings file location
    if settings.temp_dir is not None:
        temp_dir = Path(settings.temp_dir)
        if not temp_dir.is_absolute():
            settings.temp_dir = str((config_dir / temp_dir).resolve())

    return settings
