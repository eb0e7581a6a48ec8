"""
Plain-text script converter.

Any file that is not HTML is read as UTF-8 text and transliterated as a
whole. Characters outside the romanization (markup, punctuation, foreign
words) pass through untouched.
"""

import os

from ..config import ConversionConfig
from ..engine import transliterate
from ..profiles import get_profile


class TextConverter:
    """Converts plain-text files to a target script."""

    SUPPORTED_EXTENSIONS = {".txt", ".md", ".csv", ".tsv"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in TextConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str, options: ConversionConfig) -> str:
        """Convert a text file and return the converted text."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()

        return TextConverter.convert_text(content, options)

    @staticmethod
    def convert_text(content: str, options: ConversionConfig) -> str:
        profile = get_profile(options.script, alternate=options.alternate_glyphs)
        return transliterate(content, profile, options.localize_numbers)
