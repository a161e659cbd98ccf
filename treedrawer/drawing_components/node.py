from typing import Iterator, List, Optional, Tuple, Union

from ..errors import NodeNotFoundError
from .core import BoxChars
from .layout import stringify
from .values import Renderable, ValueLike, as_renderable


class Tree:
    """A node of a tree whose values are drawn as boxes.

    A node owns its children. ``parent`` points back up and is only used
    to walk towards the root.
    """

    def __init__(self, value: ValueLike) -> None:
        self._value = as_renderable(value)
        self._parent: Optional["Tree"] = None
        self._children: List["Tree"] = []

    @property
    def value(self) -> Renderable:
        return self._value

    @value.setter
    def value(self, value: ValueLike) -> None:
        self._value = as_renderable(value)

    @property
    def parent(self) -> Optional["Tree"]:
        return self._parent

    @property
    def children(self) -> Tuple["Tree", ...]:
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def add_child(self, value: ValueLike) -> "Tree":
        child = Tree(value)
        child._parent = self
        self._children.append(child)
        return child

    def child(self, index: int) -> "Tree":
        if not 0 <= index < len(self._children):
            raise NodeNotFoundError(
                f"Child {index} does not exist, node has {len(self._children)} children."
            )
        return self._children[index]

    def root(self) -> "Tree":
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def walk(self) -> Iterator["Tree"]:
        pending = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node._children))

    def render(self, style: Optional[Union[str, BoxChars]] = None) -> str:
        return stringify(self.root(), style=style).render()

    def render_subtree(
        self,
        style: Optional[Union[str, BoxChars]] = None,
        depth: Optional[int] = None,
    ) -> str:
        return stringify(self, style=style, depth=depth).render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Tree(value={self._value!r}, children={len(self._children)})"
