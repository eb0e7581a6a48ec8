"""
Plain and regular-expression search over indexed text spans.

A search produces a SearchResultSet: the spans that matched, each with its
ordered list of matches, plus a navigation cursor. The cursor walks every
match in document order and wraps around at both ends.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from bs4.element import Tag

from .document import SpanAddress, TextIndex

# Characters that may flank a whole word. Straight and typographic quotes are
# included so quoted words still match.
FRONT_BOUNDARY = r"\s.\[(?!‘“',;:\-"
BACK_BOUNDARY = r"\s.\])?!’”',;:\-"


class SearchPatternError(ValueError):
    """Raised when a regular-expression query does not compile."""
    pass


class SearchMode(Enum):
    PLAIN = "plain"
    REGEX = "regex"


class Direction(Enum):
    FORWARD = 1
    BACKWARD = -1


@dataclass
class Match:
    """One occurrence inside a span."""
    offset: int
    text: str

    @property
    def end(self) -> int:
        return self.offset + len(self.text)


@dataclass
class SearchResult:
    """All matches found in one span."""
    address: SpanAddress
    matches: list[Match]


@dataclass
class Selection:
    """A highlighted range inside one span, reported to the host."""
    address: SpanAddress
    start: int
    end: int
    text: str


@dataclass
class SearchResultSet:
    """
    Matches from one search call plus the navigation cursor.

    The cursor is (result_index, match_index) and always points at a real
    match; an empty set is never navigated.
    """
    query: str
    mode: SearchMode
    results: list[SearchResult] = field(default_factory=list)
    whole_word: bool = False
    case_sensitive: bool = False
    result_index: int = 0
    match_index: int = 0

    @property
    def count(self) -> int:
        return sum(len(result.matches) for result in self.results)

    def __bool__(self) -> bool:
        return bool(self.results)

    @property
    def cursor(self) -> tuple[int, int]:
        return self.result_index, self.match_index

    def reset_cursor(self) -> None:
        self.result_index = 0
        self.match_index = 0

    def current(self) -> tuple[SpanAddress, Match]:
        result = self.results[self.result_index]
        return result.address, result.matches[self.match_index]

    def advance(self, direction: Direction = Direction.FORWARD) -> None:
        """
        Move the cursor one match forward or backward.

        Crossing the end of a span moves to the first match of the next span
        (or the last match of the previous one); both ends wrap around.
        """
        if not self.results:
            return
        direction = Direction(direction)
        if direction is Direction.FORWARD:
            if self.match_index < len(self.results[self.result_index].matches) - 1:
                self.match_index += 1
            else:
                self.result_index = (self.result_index + 1) % len(self.results)
                self.match_index = 0
        else:
            if self.match_index > 0:
                self.match_index -= 1
            else:
                self.result_index = (self.result_index - 1) % len(self.results)
                self.match_index = len(self.results[self.result_index].matches) - 1

    def selection(self) -> Optional[Selection]:
        """Return the range covered by the match under the cursor."""
        if not self.results:
            return None
        address, match = self.current()
        return Selection(address=address, start=match.offset, end=match.end, text=match.text)


def search_plain(
    document: Tag,
    index: TextIndex,
    query: str,
    case_sensitive: bool = False,
) -> SearchResultSet:
    """
    Find every occurrence of a literal query.

    Overlapping occurrences are all reported. Offsets always index the
    original span text, even where case folding would change its length.
    Spans without a hit are left out.

    Args:
        document: The displayed document.
        index: Text index for that document.
        query: Literal text to find.
        case_sensitive: Match case exactly.

    Returns:
        A SearchResultSet with the cursor on the first match.
    """
    result_set = SearchResultSet(query=query, mode=SearchMode.PLAIN, case_sensitive=case_sensitive)
    if not query:
        return result_set

    # zero-width lookahead so overlapping hits are all found
    pattern = re.compile(f"(?=({re.escape(query)}))", 0 if case_sensitive else re.IGNORECASE)
    for address, node in index.spans(document):
        matches = [Match(offset=m.start(), text=m.group(1)) for m in pattern.finditer(str(node))]
        if matches:
            result_set.results.append(SearchResult(address, matches))
    return result_set


def compile_pattern(pattern: str, whole_word: bool = False, case_sensitive: bool = False) -> re.Pattern:
    """
    Compile a search pattern.

    Whole-word patterns must be flanked by a boundary character or a string
    edge, and honor case_sensitive. Free patterns are always case-sensitive.

    Raises:
        SearchPatternError: If the pattern is not a valid regular expression.
    """
    flags = 0
    if whole_word:
        pattern = f"(?<![^{FRONT_BOUNDARY}])(?:{pattern})(?![^{BACK_BOUNDARY}])"
        if not case_sensitive:
            flags = re.IGNORECASE
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise SearchPatternError(f"Invalid pattern: {e}") from e


def search_regex(
    document: Tag,
    index: TextIndex,
    pattern: str,
    whole_word: bool = False,
    case_sensitive: bool = False,
) -> SearchResultSet:
    """
    Find every match of a regular expression.

    Each match records the matched text and its start offset. Boundary
    characters of a whole-word search are not part of the match.

    Raises:
        SearchPatternError: If the pattern does not compile.
    """
    result_set = SearchResultSet(
        query=pattern,
        mode=SearchMode.REGEX,
        whole_word=whole_word,
        case_sensitive=case_sensitive,
    )
    if not pattern:
        return result_set

    compiled = compile_pattern(pattern, whole_word, case_sensitive)
    for address, node in index.spans(document):
        matches = [
            Match(offset=m.start(), text=m.group(0))
            for m in compiled.finditer(str(node))
            if m.end() > m.start()
        ]
        if matches:
            result_set.results.append(SearchResult(address, matches))
    return result_set
