"""
Unit tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from paliscript.config import Config, ConversionConfig, OutputConfig
from tests.fixtures import SAMPLE_CONFIG_YAML


class TestConversionConfig:
    """Tests for ConversionConfig validation."""

    def test_defaults(self):
        config = ConversionConfig()
        assert config.script == "DEVANAGARI"
        assert config.localize_numbers is True
        assert config.alternate_glyphs is False

    def test_script_is_normalized(self):
        assert ConversionConfig(script=" khmer ").script == "KHMER"

    def test_unknown_script_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported script"):
            ConversionConfig(script="klingon")

    def test_roman_rejected(self):
        with pytest.raises(ValidationError):
            ConversionConfig(script="roman")

    def test_assignment_is_validated(self):
        config = ConversionConfig()
        config.script = "myanmar"
        assert config.script == "MYANMAR"
        with pytest.raises(ValidationError):
            config.script = "klingon"


class TestConfigFile:
    """Tests for YAML loading and saving."""

    def test_defaults(self):
        config = Config()
        assert config.output.output_dir == Path("paliscript_output")
        assert config.output.suffix == "_converted"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "paliscript.yaml"
        path.write_text(SAMPLE_CONFIG_YAML, encoding="utf-8")
        config = Config.from_yaml(path)
        assert config.conversion.script == "THAI"
        assert config.conversion.localize_numbers is False
        assert config.conversion.alternate_glyphs is True
        assert config.output == OutputConfig(output_dir=Path("out"), suffix="_th")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert Config.from_yaml(path) == Config()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "partial.yaml"
        path.write_text("conversion:\n  script: sinhala\n", encoding="utf-8")
        config = Config.from_yaml(path)
        assert config.conversion.script == "SINHALA"
        assert config.conversion.localize_numbers is True
        assert config.output.suffix == "_converted"

    def test_invalid_script_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("conversion:\n  script: klingon\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            Config.from_yaml(path)

    def test_round_trip(self, tmp_path):
        path = tmp_path / "saved.yaml"
        config = Config(conversion=ConversionConfig(script="thai", alternate_glyphs=True))
        config.to_yaml(path)
        assert Config.from_yaml(path) == config

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")
