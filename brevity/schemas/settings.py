"""Converter configuration.

Settings only change how content is emitted and how the CLI logs. The
element schema table is fixed and cannot be extended from configuration.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field


class ConverterSettings(BaseModel):
    """Options for a NoteBuilder and the brev2html CLI."""

    escape_content: bool = Field(
        default=False,
        description="HTML-escape element content before insertion. Off by default so existing notes "
                    "render unchanged.",
    )
    document_lang: str = Field(default="en", description="lang attribute of standalone documents")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ConverterSettings":
        """Load settings from a YAML configuration file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str | Path) -> None:
        """Save settings to a YAML configuration file."""
        path = Path(path)
        data = self.model_dump()
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
