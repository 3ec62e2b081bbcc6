"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "PEEKMD_"


class Settings(BaseModel):
    app_name:        str  = "peekmd"
    html:            bool = Field(default=True,  description="Pass raw HTML in the markdown through")
    linkify:         bool = Field(default=True,  description="Autolink bare URLs")
    typographer:     bool = Field(default=False, description="Smart quotes and dash substitution")
    highlight_style: str  = Field(default="default", description="Pygments style for code blocks")
    output_dir:      str  = Field(default=".peekmd", description="Directory for rendered HTML pages")
    log_level:       str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    def parser_options(self) -> dict[str, bool]:
        """Keyword arguments for create_parser / render_markdown."""
        return {"html": self.html, "linkify": self.linkify, "typographer": self.typographer}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then PEEKMD_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
