"""
Web page script converter.

Fetches an HTML page in romanized Pali and converts its paragraph text to a
target script. Plain-text responses are transliterated as a whole.
"""

import logging
from urllib.parse import urlparse

from ..config import ConversionConfig
from .html_converter import HtmlConverter
from .text_converter import TextConverter

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}
TIMEOUT = 30


class WebConverter:
    """Converts web pages to a target script."""

    @staticmethod
    def can_handle(source: str) -> bool:
        """Check if the source looks like a URL."""
        try:
            parsed = urlparse(source)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except ValueError:
            return False

    @staticmethod
    def fetch(url: str) -> tuple[str, str]:
        """
        Download a page.

        Returns:
            (text, content type) of the response.
        """
        try:
            import requests
        except ImportError:
            raise RuntimeError("requests is not installed. Run: pip install requests")

        response = requests.get(url, headers=HEADERS, timeout=TIMEOUT, allow_redirects=True)
        response.raise_for_status()
        logger.debug("Fetched %s (%d bytes)", url, len(response.content))
        return response.text, response.headers.get("Content-Type", "")

    @staticmethod
    def convert(url: str, options: ConversionConfig) -> str:
        """Fetch a URL and return its converted content."""
        text, content_type = WebConverter.fetch(url)
        if content_type.startswith("text/plain"):
            return TextConverter.convert_text(text, options)
        return HtmlConverter.convert_markup(text, options)


def url_to_filename(url: str, suffix: str = "") -> str:
    """Generate an output filename from a URL."""
    parsed = urlparse(url)
    path = parsed.path.strip("/").replace("/", "_") or "index"
    if path.lower().endswith((".html", ".htm")):
        path = path.rsplit(".", 1)[0]
    domain = parsed.netloc.replace(".", "_")
    safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in f"{domain}_{path}")
    return f"{safe}{suffix}.html"
