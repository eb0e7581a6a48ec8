"""
Viewer session: one document, its canonical copy, and its search state.

The session is what a host talks to. It converts the displayed document to a
target script, restores the romanized original, runs searches and moves
through their results, reporting back through a ViewerHost.
"""

import copy
import logging
import threading
from typing import Optional, Union

from bs4 import BeautifulSoup

from .document import TextIndex, parse_document, set_text
from .engine import transliterate
from .host import ViewerHost
from .profiles import ScriptName, ScriptProfile, get_profile
from .search import (
    Direction,
    SearchPatternError,
    SearchResultSet,
    Selection,
    search_plain,
    search_regex,
)

logger = logging.getLogger(__name__)

# Clicks on these markers carry no prose
MARKER_CLASSES = {"paranum", "hangnum"}


class ViewerSession:
    """
    Holds the displayed document and everything derived from it.

    The canonical (romanized) copy is captured lazily, once, the first time
    it is needed; every conversion starts again from it, so conversions never
    compound and can always be undone.
    """

    def __init__(self, document: Union[BeautifulSoup, str], host: Optional[ViewerHost] = None):
        """
        Initialize a session.

        Args:
            document: Parsed document or HTML markup in romanized Pali.
            host: Receiver for status callbacks. Defaults to a no-op host.
        """
        if isinstance(document, str):
            document = parse_document(document)
        self.document: BeautifulSoup = document
        self.host = host or ViewerHost()
        self.index = TextIndex.build(document)
        self.script = ScriptName.ROMAN
        self.results: Optional[SearchResultSet] = None
        self._canonical: Optional[BeautifulSoup] = None
        self._canonical_lock = threading.Lock()
        # profile and numeral option of the displayed conversion
        self._rendering: Optional[tuple[ScriptProfile, bool]] = None
        logger.debug("Indexed %d text spans", len(self.index))

    @property
    def canonical(self) -> BeautifulSoup:
        """The romanized original, captured on first access."""
        if self._canonical is None:
            with self._canonical_lock:
                if self._canonical is None:
                    self._canonical = copy.copy(self.document)
        return self._canonical

    def rebuild_index(self) -> None:
        """
        Re-index after a structural edit.

        While the romanized text is displayed, the edited document becomes the
        new canonical copy. A converted document is derived from the canonical
        copy, so structural edits to it are dropped and the current conversion
        is rendered again.
        """
        if self._rendering is None:
            with self._canonical_lock:
                self._canonical = None
            self.index = TextIndex.build(self.document)
            self.results = None
            return
        self.index = TextIndex.build(self.canonical)
        profile, localize_numbers = self._rendering
        self._render(profile, localize_numbers)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert(
        self,
        script: Union[ScriptName, str],
        localize_numbers: bool = False,
        use_alternate_glyphs: bool = False,
    ) -> None:
        """
        Display the document in another script.

        Args:
            script: Target script name.
            localize_numbers: Use native digits where the script has them.
            use_alternate_glyphs: Use the script's alternate glyph set.

        Raises:
            UnsupportedScript: If the script has no profile. The displayed
                document is left unchanged.
        """
        profile = get_profile(script, alternate=use_alternate_glyphs)
        self._render(profile, localize_numbers)
        logger.info("Converted %d spans to %s", len(self.index), profile.name)

    def revert_to_roman(self) -> None:
        """Display the romanized original again."""
        self._replace_document(copy.copy(self.canonical), ScriptName.ROMAN)
        self._rendering = None

    def _render(self, profile: ScriptProfile, localize_numbers: bool) -> None:
        working = copy.copy(self.canonical)
        for address, node in list(self.index.spans(working)):
            set_text(working, address, transliterate(str(node), profile, localize_numbers))
        self._replace_document(working, ScriptName(profile.name))
        self._rendering = (profile, localize_numbers)

    def _replace_document(self, document: BeautifulSoup, script: ScriptName) -> None:
        self.document = document
        self.script = script
        # spans of the previous tree no longer exist
        self.results = None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str, case_sensitive: bool = False) -> bool:
        """
        Search the displayed text for a literal query.

        Returns:
            True if anything was found. An empty query does nothing.
        """
        if not query:
            return False
        return self._accept(search_plain(self.document, self.index, query, case_sensitive))

    def search_regex(self, pattern: str, whole_word: bool = False, case_sensitive: bool = False) -> bool:
        """
        Search the displayed text with a regular expression.

        case_sensitive only applies to whole-word searches; free patterns are
        always matched case-sensitively.

        Returns:
            True if anything was found. An empty pattern does nothing.
        """
        if not pattern:
            return False
        try:
            result_set = search_regex(self.document, self.index, pattern, whole_word, case_sensitive)
        except SearchPatternError as e:
            logger.warning("Rejected search pattern %r: %s", pattern, e)
            self.host.report_search_found(False)
            self.host.report_message(str(e))
            return False
        return self._accept(result_set)

    def _accept(self, result_set: SearchResultSet) -> bool:
        if not result_set:
            self.host.report_search_found(False)
            self.host.report_message("Not found")
            return False
        self.results = result_set
        self.results.reset_cursor()
        self._show_current()
        self.host.report_search_found(True)
        self.host.report_message(f"{result_set.count} found")
        return True

    def find_next(self, direction: Union[Direction, int] = Direction.FORWARD) -> Optional[Selection]:
        """
        Move to the next or previous match and show it.

        Returns:
            The new selection, or None when there is no active search.
        """
        if not self.results:
            return None
        self.results.advance(Direction(direction))
        return self._show_current()

    def current_selection(self) -> Optional[Selection]:
        return self.results.selection() if self.results else None

    def _show_current(self) -> Optional[Selection]:
        selection = self.results.selection()
        if selection is not None:
            self.host.show_selection(selection)
        return selection

    # ------------------------------------------------------------------
    # Pass-through actions
    # ------------------------------------------------------------------

    def body_text(self) -> str:
        """Plain text of the displayed document."""
        body = self.document.body or self.document
        return body.get_text()

    def handle_selection(self, text: str) -> None:
        """Forward a non-empty text selection to dictionary lookup."""
        text = text.strip()
        if text:
            self.host.show_dictionary_result(text)
            self.host.notify_clicked_text(text)

    def handle_click(self, text: str, css_class: str = "") -> None:
        """Report clicked text; paragraph and page markers report nothing."""
        self.host.notify_clicked_text("" if css_class in MARKER_CLASSES else text)

    def copy_selection(self, text: str) -> None:
        if text:
            self.host.copy_text(text)

    def save_selection(self, text: str) -> None:
        if text:
            self.host.save_text(text)

    def copy_body(self) -> None:
        self.host.copy_text(self.body_text())

    def save_body(self) -> None:
        text = self.body_text()
        if text:
            self.host.save_text(text)

    def open_declension(self, term: str) -> None:
        if term:
            self.host.open_declension(term)
