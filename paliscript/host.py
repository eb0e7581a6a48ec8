"""
Callbacks from the viewer core to its host application.

The host owns everything visual and interactive: rendering, selection
highlighting, clipboard, file dialogs and dictionary lookups. ViewerHost is a
do-nothing base; hosts override the calls they care about.
"""

from .search import Selection


class ViewerHost:
    """Base host. Every callback is a no-op."""

    def show_dictionary_result(self, text: str) -> None:
        pass

    def notify_clicked_text(self, text: str) -> None:
        pass

    def report_search_found(self, found: bool) -> None:
        pass

    def report_message(self, message: str) -> None:
        pass

    def show_selection(self, selection: Selection) -> None:
        pass

    def copy_text(self, text: str) -> None:
        pass

    def save_text(self, text: str) -> None:
        pass

    def open_declension(self, term: str) -> None:
        pass
