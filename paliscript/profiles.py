"""
Script profiles for the Pali transliteration engine.

Each supported Brahmic script is described by one immutable ScriptProfile:
its vowel forms, consonant glyphs, numerals and conjunct marker. The engine
itself is script-agnostic; everything that differs between Thai, Khmer,
Myanmar, Sinhala and Devanagari lives in these tables.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class UnsupportedScript(ValueError):
    """Raised when a script name has no profile."""
    pass


class ScriptName(Enum):
    """Target scripts. ROMAN is the canonical (source) script."""
    ROMAN = "ROMAN"
    THAI = "THAI"
    KHMER = "KHMER"
    MYANMAR = "MYANMAR"
    SINHALA = "SINHALA"
    DEVANAGARI = "DEVANAGARI"


# Romanized Pali alphabet
VOWELS = "aāiīuūeo"
ROMAN_CONSONANTS = (
    "k", "kh", "g", "gh", "ṅ",
    "c", "ch", "j", "jh", "ñ",
    "ṭ", "ṭh", "ḍ", "ḍh", "ṇ",
    "t", "th", "d", "dh", "n",
    "p", "ph", "b", "bh", "m",
    "y", "r", "l", "v", "s", "h", "ḷ", "ṃ",
)
# Letters that take the aspirated slot (slot + 1) when followed by 'h'
ASPIRABLE = frozenset("bcdgjkptḍṭ")
# Letters that count as consonants for vowel placement and clustering.
# Niggahita is not one of them. The Sanskrit extras have no glyph.
CONSONANT_LETTERS = frozenset("kgṅcjñṭḍṇtdnpbmyrlvshḷśṣṛṝḹ")
RESERVED = "x"

CONSONANT_SLOTS = {
    letter: slot for slot, letter in enumerate(ROMAN_CONSONANTS) if len(letter) == 1
}


def _digits(zero: int) -> tuple[str, ...]:
    return tuple(chr(zero + d) for d in range(10))


@dataclass(frozen=True)
class ScriptProfile:
    """
    Lookup tables for one target script.

    Vowel tables follow VOWELS order and consonants follow ROMAN_CONSONANTS
    order. Entries may hold more than one codepoint where the script spells a
    vowel with a sequence (Khmer and Myanmar independent aa, Thai carrier
    letter, Myanmar o).
    """
    name: str
    independent_vowels: tuple[str, ...]
    dependent_vowels: tuple[str, ...]
    consonants: tuple[str, ...]
    conjunct_marker: str
    numerals: Optional[tuple[str, ...]] = None
    period_glyph: str = "."
    prefixed_vowels: frozenset = field(default_factory=frozenset)
    alternate_consonants: dict = field(default_factory=dict, compare=False)  # slot -> glyph

    def __post_init__(self):
        if len(self.independent_vowels) != len(VOWELS):
            raise ValueError(f"{self.name}: expected {len(VOWELS)} independent vowels")
        if len(self.dependent_vowels) != len(VOWELS):
            raise ValueError(f"{self.name}: expected {len(VOWELS)} dependent vowels")
        if len(self.consonants) != len(ROMAN_CONSONANTS):
            raise ValueError(f"{self.name}: expected {len(ROMAN_CONSONANTS)} consonants")
        if self.numerals is not None and len(self.numerals) != 10:
            raise ValueError(f"{self.name}: expected 10 numerals")

    @property
    def localizes_numbers(self) -> bool:
        return self.numerals is not None

    def with_alternate_glyphs(self) -> "ScriptProfile":
        """Return a copy using the alternate consonant glyphs, if any."""
        if not self.alternate_consonants:
            return self
        consonants = list(self.consonants)
        for slot, glyph in self.alternate_consonants.items():
            consonants[slot] = glyph
        return replace(self, consonants=tuple(consonants), alternate_consonants={})


THAI = ScriptProfile(
    name="THAI",
    # Thai has no independent vowel letters: the carrier letter o ang takes the sign,
    # and the prefixed e/o signs are written before it.
    independent_vowels=(
        "\u0E2D", "\u0E2D\u0E32", "\u0E2D\u0E34", "\u0E2D\u0E35",
        "\u0E2D\u0E38", "\u0E2D\u0E39", "\u0E40\u0E2D", "\u0E42\u0E2D",
    ),
    dependent_vowels=(
        "", "\u0E32", "\u0E34", "\u0E35", "\u0E38", "\u0E39", "\u0E40", "\u0E42",
    ),
    consonants=(
        "\u0E01", "\u0E02", "\u0E04", "\u0E06", "\u0E07",
        "\u0E08", "\u0E09", "\u0E0A", "\u0E0C", "\u0E0D",
        "\u0E0F", "\u0E10", "\u0E11", "\u0E12", "\u0E13",
        "\u0E15", "\u0E16", "\u0E17", "\u0E18", "\u0E19",
        "\u0E1B", "\u0E1C", "\u0E1E", "\u0E20", "\u0E21",
        "\u0E22", "\u0E23", "\u0E25", "\u0E27", "\u0E2A", "\u0E2B", "\u0E2C", "\u0E4D",
    ),
    conjunct_marker="\u0E3A",  # phinthu
    numerals=_digits(0x0E50),
    prefixed_vowels=frozenset("eo"),
    # Pali Thai fonts: yo ying and tho than without the lower flourish
    alternate_consonants={9: "\uF70F", 11: "\uF700"},
)

KHMER = ScriptProfile(
    name="KHMER",
    independent_vowels=(
        "\u17A2", "\u17A2\u17B6", "\u17A5", "\u17A6",
        "\u17A7", "\u17A9", "\u17AF", "\u17B1",
    ),
    dependent_vowels=(
        "", "\u17B6", "\u17B7", "\u17B8", "\u17BB", "\u17BC", "\u17C1", "\u17C4",
    ),
    consonants=(
        "\u1780", "\u1781", "\u1782", "\u1783", "\u1784",
        "\u1785", "\u1786", "\u1787", "\u1788", "\u1789",
        "\u178A", "\u178B", "\u178C", "\u178D", "\u178E",
        "\u178F", "\u1790", "\u1791", "\u1792", "\u1793",
        "\u1794", "\u1795", "\u1796", "\u1797", "\u1798",
        "\u1799", "\u179A", "\u179B", "\u179C", "\u179F", "\u17A0", "\u17A1", "\u17C6",
    ),
    conjunct_marker="\u17D2",  # coeng
    numerals=_digits(0x17E0),
)

MYANMAR = ScriptProfile(
    name="MYANMAR",
    independent_vowels=(
        "\u1021", "\u1021\u102C", "\u1023", "\u1024",
        "\u1025", "\u1026", "\u1027", "\u1029",
    ),
    dependent_vowels=(
        "", "\u102B", "\u102D", "\u102E", "\u102F", "\u1030", "\u1031", "\u1031\u102B",
    ),
    consonants=(
        "\u1000", "\u1001", "\u1002", "\u1003", "\u1004",
        "\u1005", "\u1006", "\u1007", "\u1008", "\u100A",
        "\u100B", "\u100C", "\u100D", "\u100E", "\u100F",
        "\u1010", "\u1011", "\u1012", "\u1013", "\u1014",
        "\u1015", "\u1016", "\u1017", "\u1018", "\u1019",
        "\u101A", "\u101B", "\u101C", "\u101D", "\u101E", "\u101F", "\u1020", "\u1036",
    ),
    conjunct_marker="\u1039",
    numerals=_digits(0x1040),
)

SINHALA = ScriptProfile(
    name="SINHALA",
    independent_vowels=(
        "\u0D85", "\u0D86", "\u0D89", "\u0D8A", "\u0D8B", "\u0D8C", "\u0D91", "\u0D94",
    ),
    dependent_vowels=(
        "", "\u0DCF", "\u0DD2", "\u0DD3", "\u0DD4", "\u0DD6", "\u0DD9", "\u0DDC",
    ),
    consonants=(
        "\u0D9A", "\u0D9B", "\u0D9C", "\u0D9D", "\u0D9E",
        "\u0DA0", "\u0DA1", "\u0DA2", "\u0DA3", "\u0DA4",
        "\u0DA7", "\u0DA8", "\u0DA9", "\u0DAA", "\u0DAB",
        "\u0DAD", "\u0DAE", "\u0DAF", "\u0DB0", "\u0DB1",
        "\u0DB4", "\u0DB5", "\u0DB6", "\u0DB7", "\u0DB8",
        "\u0DBA", "\u0DBB", "\u0DBD", "\u0DC0", "\u0DC3", "\u0DC4", "\u0DC5", "\u0D82",
    ),
    conjunct_marker="\u0DCA",
    # Sinhala digits are never localized
    numerals=None,
)

DEVANAGARI = ScriptProfile(
    name="DEVANAGARI",
    independent_vowels=(
        "\u0905", "\u0906", "\u0907", "\u0908", "\u0909", "\u090A", "\u090F", "\u0913",
    ),
    dependent_vowels=(
        "", "\u093E", "\u093F", "\u0940", "\u0941", "\u0942", "\u0947", "\u094B",
    ),
    consonants=(
        "\u0915", "\u0916", "\u0917", "\u0918", "\u0919",
        "\u091A", "\u091B", "\u091C", "\u091D", "\u091E",
        "\u091F", "\u0920", "\u0921", "\u0922", "\u0923",
        "\u0924", "\u0925", "\u0926", "\u0927", "\u0928",
        "\u092A", "\u092B", "\u092C", "\u092D", "\u092E",
        "\u092F", "\u0930", "\u0932", "\u0935", "\u0938", "\u0939", "\u0933", "\u0902",
    ),
    conjunct_marker="\u094D",  # virama
    numerals=_digits(0x0966),
)

PROFILES = {
    ScriptName.THAI: THAI,
    ScriptName.KHMER: KHMER,
    ScriptName.MYANMAR: MYANMAR,
    ScriptName.SINHALA: SINHALA,
    ScriptName.DEVANAGARI: DEVANAGARI,
}


def parse_script_name(name) -> ScriptName:
    """
    Normalize a script name.

    Args:
        name: A ScriptName or a case-insensitive name such as "thai".

    Returns:
        The matching ScriptName.

    Raises:
        UnsupportedScript: If the name is unknown.
    """
    if isinstance(name, ScriptName):
        return name
    try:
        return ScriptName(str(name).strip().upper())
    except ValueError:
        raise UnsupportedScript(f"Unsupported script: {name!r}") from None


def get_profile(name, alternate: bool = False) -> ScriptProfile:
    """
    Look up the profile for a target script.

    Args:
        name: Script name (ScriptName or string).
        alternate: Use the script's alternate glyph set where it has one.

    Returns:
        The ScriptProfile.

    Raises:
        UnsupportedScript: If the script is unknown or is ROMAN.
    """
    script = parse_script_name(name)
    profile = PROFILES.get(script)
    if profile is None:
        raise UnsupportedScript(f"No conversion profile for {script.value}")
    return profile.with_alternate_glyphs() if alternate else profile


def supported_scripts() -> list[str]:
    """Return the names of all target scripts."""
    return [script.value for script in PROFILES]
