import random
from dataclasses import dataclass, field
from html.parser import HTMLParser
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .drawing_components.node import Tree
from .errors import ConfigurationError

MAX_RANDOM_CHILDREN = 3
MAX_RANDOM_VALUE = 999

DOCUMENT_LABEL = "#document"

_VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


# start tags that implicitly close an open sibling of these names
_AUTO_CLOSE = {
    "li": frozenset({"li"}),
    "p": frozenset({"p"}),
    "option": frozenset({"option"}),
    "tr": frozenset({"tr"}),
    "td": frozenset({"td", "th"}),
    "th": frozenset({"td", "th"}),
}


def random_tree(layers: int, rng: Optional[random.Random] = None) -> Tree:
    """Build a tree of random ints at most ``layers`` levels deep."""
    if isinstance(layers, bool) or not isinstance(layers, int) or layers < 1:
        raise ConfigurationError("layers must be a positive integer.")
    rng = rng or random.Random()

    root = Tree(rng.randint(0, MAX_RANDOM_VALUE))

    def grow(node: Tree, layer: int) -> None:
        if layer >= layers:
            return
        for _ in range(rng.randint(0, MAX_RANDOM_CHILDREN)):
            grow(node.add_child(rng.randint(0, MAX_RANDOM_VALUE)), layer + 1)

    grow(root, 1)
    return root


def from_path(path: Union[str, Path], include_hidden: bool = False) -> Tree:
    """Build the directory tree below ``path``, labelled by entry name."""
    base = Path(path)
    if not base.exists():
        raise ConfigurationError(f"Path does not exist: {base}")

    root = Tree(base.resolve().name or str(base))

    def visit(directory: Path, node: Tree) -> None:
        # unreadable directories stay leaves
        try:
            entries = sorted(directory.iterdir(), key=lambda item: item.name)
        except OSError:
            return
        for entry in entries:
            if entry.name.startswith(".") and not include_hidden:
                continue
            child = node.add_child(entry.name)
            if entry.is_dir() and not entry.is_symlink():
                visit(entry, child)

    if base.is_dir():
        visit(base, root)
    return root


@dataclass
class _HtmlNode:
    label: str
    children: List["_HtmlNode"] = field(default_factory=list)


class _TreeCollector(HTMLParser):

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.document = _HtmlNode(DOCUMENT_LABEL)
        self._open: List[_HtmlNode] = [self.document]

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if len(self._open) > 1 and self._open[-1].label in _AUTO_CLOSE.get(tag, ()):
            self._open.pop()
        element = _HtmlNode(tag)
        self._open[-1].children.append(element)
        if tag not in _VOID_ELEMENTS:
            self._open.append(element)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self._open[-1].children.append(_HtmlNode(tag))

    def handle_endtag(self, tag: str) -> None:
        # unmatched end tags are ignored, unclosed ones are closed implicitly
        for index in range(len(self._open) - 1, 0, -1):
            if self._open[index].label == tag:
                del self._open[index:]
                return

    def handle_data(self, data: str) -> None:
        text = data.strip()
        if text:
            self._open[-1].children.append(_HtmlNode(text))


def _attach(node: Tree, source: _HtmlNode) -> None:
    for child in source.children:
        _attach(node.add_child(child.label), child)


def from_html(markup: str) -> Tree:
    """Build the element tree of an HTML fragment.

    Elements are labelled by tag name and text by its stripped content.
    """
    collector = _TreeCollector()
    collector.feed(markup)
    collector.close()

    top = collector.document
    if len(top.children) == 1:
        top = top.children[0]

    root = Tree(top.label)
    _attach(root, top)
    return root
