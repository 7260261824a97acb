"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    vault_dir:         Optional[str] = Field(default=None, description="Root folder of the note vault")
    output_dir:        str = Field(default="dist",          description="First directory tried for HTML/PDF output")
    fallback_dir:      Optional[str] = Field(default="~/Downloads", description="Tried when output_dir is not writable")
    fallback_name:     str = Field(default="DnD_Adventure", description="Output base name when the source has none")
    output_format:     str = Field(default="both", pattern="^(html|pdf|both)$", description="html, pdf or both")
    convert_lists:     bool = Field(default=False, description="Render '- ' lines as list items")
    strip_frontmatter: bool = Field(default=True,  description="Drop YAML frontmatter before conversion")
    log_level:         str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then VAULTPRESS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"VAULTPRESS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
