"""
Roman-to-Brahmic transliteration engine.

A single left-to-right pass over lowercased romanized Pali, driven entirely by
a ScriptProfile. Characters outside the romanization scheme are copied through
unchanged; the engine never rejects input.
"""

from .profiles import (
    ASPIRABLE,
    CONSONANT_LETTERS,
    CONSONANT_SLOTS,
    RESERVED,
    VOWELS,
    ScriptProfile,
)


def transliterate(text: str, profile: ScriptProfile, localize_numbers: bool = False) -> str:
    """
    Convert romanized Pali text to the script described by a profile.

    Args:
        text: Romanized input. Case is ignored.
        profile: Target script profile.
        localize_numbers: Replace ASCII digits with the script's numerals,
            when the script has them.

    Returns:
        The converted text.
    """
    source = text.lower()
    length = len(source)
    output: list[str] = []
    index = 0

    while index < length:
        char = source[index]
        step = 1

        if "0" <= char <= "9":
            if localize_numbers and profile.numerals is not None:
                output.append(profile.numerals[int(char)])
            else:
                output.append(char)

        elif char == ".":
            output.append(profile.period_glyph)

        elif char == RESERVED:
            output.append(char)

        elif char in VOWELS:
            follows_consonant = index > 0 and source[index - 1] in CONSONANT_LETTERS
            _place_vowel(output, profile, VOWELS.index(char), char, follows_consonant)

        elif char in CONSONANT_SLOTS:
            slot = CONSONANT_SLOTS[char]
            if char in ASPIRABLE and index + 1 < length and source[index + 1] == "h":
                slot += 1
                step = 2
            output.append(profile.consonants[slot])
            following = index + step
            if (
                char in CONSONANT_LETTERS
                and following < length
                and source[following] in CONSONANT_LETTERS
            ):
                output.append(profile.conjunct_marker)

        else:
            output.append(char)

        index += step

    return "".join(output)


def _place_vowel(
    output: list[str],
    profile: ScriptProfile,
    vowel_index: int,
    vowel: str,
    follows_consonant: bool,
) -> None:
    """Append the independent or dependent form of a vowel."""
    if not follows_consonant:
        output.append(profile.independent_vowels[vowel_index])
        return

    sign = profile.dependent_vowels[vowel_index]
    if not sign:
        # inherent vowel
        return
    if vowel in profile.prefixed_vowels:
        output.insert(len(output) - 1, sign)
    else:
        output.append(sign)
