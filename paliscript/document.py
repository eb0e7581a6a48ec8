"""
Text index over an HTML document.

The index is an ordered list of span addresses pointing at the prose text
nodes of a parsed document: text directly inside a paragraph, and text one
level down inside inline elements. Hyperlinks are opaque and never indexed.
Because addresses are positional, the same index resolves against any copy of
the document that shares its paragraph/child structure (the canonical copy, a
converted working copy, or the displayed tree).

An index is stale once the paragraph/child structure of the document changes.
Staleness is not detected; rebuild the index after any structural edit.
"""

from typing import Iterator, NamedTuple, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

BLOCK_TAG = "p"
OPAQUE_TAGS = {"a"}


class SpanAddress(NamedTuple):
    """Position of a text node: paragraph, child, and optional grandchild."""
    block: int
    child: int
    nested: Optional[int] = None


def parse_document(markup: str) -> BeautifulSoup:
    """Parse HTML markup into a document tree."""
    return BeautifulSoup(markup, "html.parser")


def is_text_node(node) -> bool:
    """True for prose strings; comments, CDATA and doctypes are excluded."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_opaque(node) -> bool:
    return isinstance(node, Tag) and node.name in OPAQUE_TAGS


class TextIndex:
    """Ordered addresses of every indexed text span in a document."""

    def __init__(self, addresses: Optional[list[SpanAddress]] = None):
        self.addresses: list[SpanAddress] = list(addresses or [])

    @classmethod
    def build(cls, document: Tag) -> "TextIndex":
        """
        Index the text spans of a document.

        Args:
            document: Parsed document (or any tag containing paragraphs).

        Returns:
            A TextIndex in document order.
        """
        addresses = []
        for i, block in enumerate(document.find_all(BLOCK_TAG)):
            for j, child in enumerate(block.contents):
                if is_text_node(child):
                    addresses.append(SpanAddress(i, j))
                elif isinstance(child, Tag) and not is_opaque(child):
                    for k, grandchild in enumerate(child.contents):
                        if is_text_node(grandchild):
                            addresses.append(SpanAddress(i, j, k))
        return cls(addresses)

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[SpanAddress]:
        return iter(self.addresses)

    def spans(self, document: Tag) -> Iterator[tuple[SpanAddress, NavigableString]]:
        """Yield (address, text node) pairs resolved against a document."""
        blocks = document.find_all(BLOCK_TAG)
        for address in self.addresses:
            yield address, _locate(blocks, address)

    def texts(self, document: Tag) -> list[str]:
        """Return the current text of every span, in index order."""
        return [str(node) for _, node in self.spans(document)]


def resolve(document: Tag, address: SpanAddress) -> NavigableString:
    """
    Find the text node at an address.

    Raises:
        IndexError: If the document no longer has that structure.
    """
    return _locate(document.find_all(BLOCK_TAG), address)


def get_text(document: Tag, address: SpanAddress) -> str:
    return str(resolve(document, address))


def set_text(document: Tag, address: SpanAddress, value: str) -> None:
    """Replace the text at an address, keeping the node's position."""
    node = resolve(document, address)
    node.replace_with(NavigableString(value))


def _locate(blocks: list, address: SpanAddress) -> NavigableString:
    node = blocks[address.block].contents[address.child]
    if address.nested is not None:
        node = node.contents[address.nested]
    return node


def document_from_text(text: str) -> BeautifulSoup:
    """Wrap plain text in a document, one paragraph per line."""
    soup = BeautifulSoup("", "html.parser")
    for line in text.splitlines():
        paragraph = soup.new_tag(BLOCK_TAG)
        if line:
            paragraph.append(NavigableString(line))
        soup.append(paragraph)
    return soup
