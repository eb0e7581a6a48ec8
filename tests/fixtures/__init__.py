# Test fixtures
from .sample_documents import (
    SAMPLE_SUTTA_HTML,
    SAMPLE_SUTTA_SPANS,
    SAMPLE_SEARCH_HTML,
    SAMPLE_TEXT,
    SAMPLE_CONFIG_YAML,
    RecordingHost,
)

__all__ = [
    "SAMPLE_SUTTA_HTML",
    "SAMPLE_SUTTA_SPANS",
    "SAMPLE_SEARCH_HTML",
    "SAMPLE_TEXT",
    "SAMPLE_CONFIG_YAML",
    "RecordingHost",
]
