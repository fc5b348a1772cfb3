"""Configuration — Pydantic Settings + YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from provmatrix.errors import ConfigError
from provmatrix.providers.catalog import DEFAULT_CATALOG_PATH

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"
DEFAULT_OUTPUT_PATH = Path("docs") / "_includes" / "matrix.html"


class Settings(BaseSettings):
    """Root settings — merges defaults, YAML config, and env vars."""

    model_config = SettingsConfigDict(env_prefix="PROVMATRIX_")

    output_path: Path = DEFAULT_OUTPUT_PATH
    catalog_path: Path = DEFAULT_CATALOG_PATH
    template_dir: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> Settings:
        """Load settings from YAML file, falling back to defaults.

        Raises ConfigError when the file exists but cannot be parsed or holds
        invalid values.
        """
        data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"invalid YAML: {exc}", path) from exc
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigError(f"cannot read config: {exc}", path) from exc
            if isinstance(raw, dict):
                data = raw

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"invalid settings: {exc}", path) from exc
