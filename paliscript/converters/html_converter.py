"""
HTML document script converter.

Converts the prose of an HTML document written in romanized Pali to another
script. Paragraph text and text inside inline elements is converted;
hyperlinks, markup and attributes are left exactly as they were.
"""

import logging
import os

from ..config import ConversionConfig
from ..session import ViewerSession

logger = logging.getLogger(__name__)


class HtmlConverter:
    """Converts HTML/XML documents to a target script."""

    SUPPORTED_EXTENSIONS = {".html", ".htm", ".xhtml", ".xml"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in HtmlConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str, options: ConversionConfig) -> str:
        """Convert an HTML file and return the converted markup."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            markup = f.read()

        return HtmlConverter.convert_markup(markup, options)

    @staticmethod
    def convert_markup(markup: str, options: ConversionConfig) -> str:
        """Convert HTML markup held in memory."""
        session = HtmlConverter.open_session(markup, options)
        return str(session.document)

    @staticmethod
    def open_session(markup: str, options: ConversionConfig) -> ViewerSession:
        """Parse markup and return a session already showing the target script."""
        session = ViewerSession(markup)
        if len(session.index) == 0:
            logger.warning("No paragraph text found; document is left as is")
        session.convert(
            options.script,
            localize_numbers=options.localize_numbers,
            use_alternate_glyphs=options.alternate_glyphs,
        )
        return session
