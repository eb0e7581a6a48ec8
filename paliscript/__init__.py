"""
paliscript - Romanized Pali Script Converter

Renders documents written in romanized Pali in Thai, Khmer, Myanmar, Sinhala
or Devanagari script, always deriving the conversion from the untouched
romanized original, and searches the displayed text with plain or regular
expression queries.
"""

from .engine import transliterate
from .profiles import ScriptName, UnsupportedScript, get_profile, supported_scripts
from .search import Direction, SearchPatternError, Selection
from .session import ViewerSession

__version__ = "1.0.0"

__all__ = [
    "transliterate",
    "ScriptName",
    "UnsupportedScript",
    "get_profile",
    "supported_scripts",
    "Direction",
    "SearchPatternError",
    "Selection",
    "ViewerSession",
]
