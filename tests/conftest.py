"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from paliscript.config import ConversionConfig
from paliscript.document import TextIndex, parse_document
from paliscript.session import ViewerSession
from tests.fixtures import (
    SAMPLE_SUTTA_HTML,
    SAMPLE_SEARCH_HTML,
    SAMPLE_TEXT,
    RecordingHost,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def sutta_document():
    """Parsed sample sutta page."""
    return parse_document(SAMPLE_SUTTA_HTML)


@pytest.fixture
def sutta_index(sutta_document):
    """Text index of the sample sutta page."""
    return TextIndex.build(sutta_document)


@pytest.fixture
def search_document():
    """Parsed document for search tests."""
    return parse_document(SAMPLE_SEARCH_HTML)


@pytest.fixture
def search_index(search_document):
    return TextIndex.build(search_document)


# ============================================================================
# Session Fixtures
# ============================================================================


@pytest.fixture
def host():
    """A host that records every callback."""
    return RecordingHost()


@pytest.fixture
def sutta_session(host):
    """Session over the sample sutta page."""
    return ViewerSession(SAMPLE_SUTTA_HTML, host=host)


@pytest.fixture
def search_session(host):
    """Session over the search sample."""
    return ViewerSession(SAMPLE_SEARCH_HTML, host=host)


@pytest.fixture
def devanagari_options():
    return ConversionConfig(script="devanagari", localize_numbers=True)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_html_file(tmp_path):
    """Sample sutta page on disk."""
    file_path = tmp_path / "brahmajala.html"
    file_path.write_text(SAMPLE_SUTTA_HTML, encoding="utf-8")
    return file_path


@pytest.fixture
def temp_source_dir(tmp_path):
    """Directory with an HTML page, a text file and an unsupported file."""
    source_dir = tmp_path / "texts"
    source_dir.mkdir()
    (source_dir / "brahmajala.html").write_text(SAMPLE_SUTTA_HTML, encoding="utf-8")
    (source_dir / "paritta.txt").write_text(SAMPLE_TEXT, encoding="utf-8")
    (source_dir / "cover.png").write_bytes(b"\x89PNG")
    return source_dir
