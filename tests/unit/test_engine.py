"""
Unit tests for the transliteration engine.
"""

import pytest

from paliscript.engine import transliterate
from paliscript.profiles import ASPIRABLE, PROFILES, ROMAN_CONSONANTS, get_profile


ALL_PROFILES = list(PROFILES.values())


class TestDevanagari:
    """Tests for conversion to Devanagari."""

    @pytest.fixture
    def deva(self):
        return get_profile("DEVANAGARI")

    def test_conjunct(self, deva):
        assert transliterate("dhammapada", deva) == "\u0927\u092E\u094D\u092E\u092A\u0926"

    def test_initial_long_vowel(self, deva):
        assert transliterate("ānanda", deva) == "\u0906\u0928\u0928\u094D\u0926"

    def test_aspirate_inside_cluster(self, deva):
        """Test that d + dh is written with a virama before the aspirate."""
        assert transliterate("buddho", deva) == "\u092C\u0941\u0926\u094D\u0927\u094B"

    def test_niggahita(self, deva):
        assert transliterate("evaṃ", deva) == "\u090F\u0935\u0902"

    def test_niggahita_does_not_cluster(self, deva):
        assert transliterate("saṃgha", deva) == "\u0938\u0902\u0918"

    def test_h_after_plain_consonant(self, deva):
        """Test that m + h stays two letters joined by a virama."""
        assert transliterate("amhākaṃ", deva) == "\u0905\u092E\u094D\u0939\u093E\u0915\u0902"

    def test_aspirate_at_end(self, deva):
        assert transliterate("dh", deva) == "\u0927"

    def test_aspirate_joins_following_consonant(self, deva):
        assert transliterate("ghra", deva) == "\u0918\u094D\u0930"

    def test_uppercase_is_folded(self, deva):
        assert transliterate("DHAMMA", deva) == transliterate("dhamma", deva)

    def test_numbers_localized(self, deva):
        assert transliterate("12.", deva, localize_numbers=True) == "\u0967\u0968."

    def test_numbers_kept(self, deva):
        assert transliterate("12.", deva) == "12."

    def test_reserved_letter_passes_through(self, deva):
        assert transliterate("x", deva) == "x"

    def test_foreign_characters_pass_through(self, deva):
        assert transliterate("q z! ?", deva) == "q z! ?"

    def test_empty(self, deva):
        assert transliterate("", deva) == ""

    def test_letters_without_glyph_pass_through(self, deva):
        """Test that Sanskrit letters outside the tables are copied and never clustered."""
        assert transliterate("śka", deva) == "ś\u0915"
        assert transliterate("ṣṭa", deva) == "ṣ\u091F"


class TestThai:
    """Tests for conversion to Thai."""

    @pytest.fixture
    def thai(self):
        return get_profile("THAI")

    def test_phinthu_cluster(self, thai):
        assert transliterate("dhamma", thai) == "\u0E18\u0E21\u0E3A\u0E21"

    def test_prefixed_o(self, thai):
        """Test that o is written before the consonant it follows."""
        assert transliterate("buddho", thai) == "\u0E1E\u0E38\u0E17\u0E3A\u0E42\u0E18"

    def test_prefixed_e(self, thai):
        assert transliterate("me", thai) == "\u0E40\u0E21"

    def test_independent_vowel_uses_carrier(self, thai):
        assert transliterate("evaṃ", thai) == "\u0E40\u0E2D\u0E27\u0E4D"
        assert transliterate("iti", thai) == "\u0E2D\u0E34\u0E15\u0E34"

    def test_prefixed_vowel_before_aspirate(self, thai):
        assert transliterate("sotthi", thai) == "\u0E42\u0E2A\u0E15\u0E3A\u0E16\u0E34"

    def test_numbers_localized(self, thai):
        assert transliterate("2566", thai, localize_numbers=True) == "\u0E52\u0E55\u0E56\u0E56"

    def test_alternate_glyphs(self):
        alternate = get_profile("THAI", alternate=True)
        assert transliterate("ñāṇa", alternate) == "\uF70F\u0E32\u0E13"


class TestOtherScripts:
    """Tests for Khmer, Myanmar and Sinhala."""

    def test_khmer_independent_aa(self):
        assert transliterate("ānanda", get_profile("KHMER")) == "\u17A2\u17B6\u1793\u1793\u17D2\u1791"

    def test_khmer_cluster(self):
        assert transliterate("buddho", get_profile("KHMER")) == "\u1796\u17BB\u1791\u17D2\u1792\u17C4"

    def test_myanmar_two_part_o(self):
        assert transliterate("sotthi", get_profile("MYANMAR")) == (
            "\u101E\u1031\u102B\u1010\u1039\u1011\u102D"
        )

    def test_myanmar_independent_aa(self):
        assert transliterate("ā", get_profile("MYANMAR")) == "\u1021\u102C"

    def test_myanmar_numbers(self):
        assert transliterate("10", get_profile("MYANMAR"), localize_numbers=True) == "\u1041\u1040"

    def test_sinhala_keeps_ascii_digits(self):
        """Test that Sinhala output keeps digits even when asked to localize."""
        result = transliterate("buddha 123", get_profile("SINHALA"), localize_numbers=True)
        assert result == "\u0DB6\u0DD4\u0DAF\u0DCA\u0DB0 123"

    def test_sinhala_niggahita(self):
        assert transliterate("ahaṃ", get_profile("SINHALA")) == "\u0D85\u0DC4\u0D82"


class TestEngineProperties:
    """Tests that hold for every script."""

    @pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.name)
    @pytest.mark.parametrize("letter", sorted(ASPIRABLE))
    def test_aspirates_collapse(self, profile, letter):
        """Test that a stop followed by h becomes the single aspirated glyph."""
        slot = ROMAN_CONSONANTS.index(letter)
        assert transliterate(letter + "ha", profile) == profile.consonants[slot + 1]

    @pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.name)
    def test_one_marker_per_cluster(self, profile):
        text = "sammāsambuddhassa"
        # mm, mb, ddh, ss
        assert transliterate(text, profile).count(profile.conjunct_marker) == 4

    @pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.name)
    def test_inherent_vowel_is_silent(self, profile):
        assert transliterate("ka", profile) == profile.consonants[0]
        assert transliterate("a", profile) == profile.independent_vowels[0]

    @pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.name)
    def test_never_raises(self, profile):
        result = transliterate("Ĳ\u2603 \t[12] <śṣ> \u201Cquote\u201D", profile, localize_numbers=True)
        assert result

    @pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.name)
    def test_deterministic(self, profile):
        text = "namo tassa bhagavato arahato sammāsambuddhassa"
        assert transliterate(text, profile) == transliterate(text, profile)
