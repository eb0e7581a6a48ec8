"""Configuration management for script conversion."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .profiles import get_profile


class ConversionConfig(BaseModel):
    """Options passed to the transliteration engine."""

    model_config = ConfigDict(validate_assignment=True)

    script: str = "DEVANAGARI"
    # batch output is fully localized; the viewer API leaves digits alone by default
    localize_numbers: bool = True
    alternate_glyphs: bool = Field(default=False, description="Use the script's alternate glyph set (Thai only)")

    @field_validator("script", mode="before")
    @classmethod
    def check_script(cls, v):
        """Normalize the name and reject scripts without a profile."""
        name = str(v).strip().upper()
        get_profile(name)
        return name


class OutputConfig(BaseModel):
    """Where and how converted files are written."""

    output_dir: Path = Path("paliscript_output")
    suffix: str = "_converted"


class Config(BaseModel):
    """Main configuration for batch conversion."""

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
