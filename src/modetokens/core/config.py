"""
Export configuration.

Configuration is loaded from the [export] and [figma] tables of
modetokens.toml. Every value has a default, so the file is optional.

Example::

    [export]
    collection_keyword = "mode"
    prefix = "base/"
    output = "app/globals.css"

    [figma]
    file_key = "AbC123"
    token_env = "FIGMA_TOKEN"
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

CONFIG_FILE = "modetokens.toml"


class FigmaConfig(BaseModel):
    """Figma REST API access."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_key: str | None = None
    api_base: str = "https://api.figma.com"
    token_env: str = "FIGMA_TOKEN"
    timeout: float = Field(default=30.0, gt=0)

    def token(self) -> str | None:
        """Read the access token from the configured environment variable."""
        return os.environ.get(self.token_env) or None


class ExportConfig(BaseModel):
    """Which collection and variables to export, and where to write them."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    collection_keyword: str = Field(default="mode", min_length=1)
    prefix: str = Field(default="base/", min_length=1)
    light_mode: str = Field(default="light", min_length=1)
    dark_mode: str = Field(default="dark", min_length=1)
    output: str = "globals.css"
    figma: FigmaConfig = Field(default_factory=FigmaConfig)

    @field_validator("prefix")
    @classmethod
    def _prefix_is_a_path(cls, value: str) -> str:
        if not value.endswith("/"):
            raise ValueError("prefix must end with '/'")
        return value


def get_config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILE


def _parse_config_data(data: dict[str, Any]) -> ExportConfig:
    export_data = dict(data.get("export", {}))
    figma_data = data.get("figma", {})
    if figma_data:
        export_data["figma"] = figma_data
    return ExportConfig(**export_data)


def load_config(path: Path | None = None) -> ExportConfig:
    """Load ExportConfig from a TOML file.

    Args:
        path: Config file. A missing file (or None) yields defaults.

    Raises:
        ConfigurationError: If the file cannot be parsed or holds invalid values.
    """
    if path is None or not path.exists():
        return ExportConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Unable to read {path}: {e}") from e

    try:
        return _parse_config_data(data)
    except (ValidationError, TypeError) as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e
