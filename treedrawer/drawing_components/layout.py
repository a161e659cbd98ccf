from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from ..errors import CanvasError, ConfigurationError, LayoutError
from .canvas import Canvas
from .core import BoxChars, resolve_box_chars

if TYPE_CHECKING:
    from .node import Tree


@dataclass
class _ChildStrip:
    """Sibling canvases placed side by side, one blank column apart."""

    canvases: List[Canvas] = field(default_factory=list)
    lefts: List[int] = field(default_factory=list)
    middles: List[int] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def append(self, canvas: Canvas, last: bool) -> None:
        child_w, child_h = canvas.dimensions()
        left = self.width
        # the strip must end up odd so every middle is a whole column
        if last and (left + child_w) % 2 == 0:
            left += 1
        self.canvases.append(canvas)
        self.lefts.append(left)
        self.middles.append(left + child_w // 2)
        self.width = left + child_w if last else left + child_w + 1
        self.height = max(self.height, child_h)

    def shift(self, dx: int) -> None:
        self.lefts = [left + dx for left in self.lefts]
        self.middles = [middle + dx for middle in self.middles]


def _round_up_odd(width: int) -> int:
    return width + 1 - width % 2


def _draw_box(canvas: Canvas, chars: BoxChars, start_x: int, start_y: int, end_x: int, end_y: int) -> None:
    canvas.set(start_x, start_y, chars.top_left)
    canvas.set(end_x, start_y, chars.top_right)
    canvas.set(start_x, end_y, chars.bottom_left)
    canvas.set(end_x, end_y, chars.bottom_right)
    for x in range(start_x + 1, end_x):
        canvas.set(x, start_y, chars.horizontal)
        canvas.set(x, end_y, chars.horizontal)
    for y in range(start_y + 1, end_y):
        canvas.set(start_x, y, chars.vertical)
        canvas.set(end_x, y, chars.vertical)


def _draw_boxed_value(canvas: Canvas, chars: BoxChars, value_canvas: Canvas) -> None:
    val_w, val_h = value_canvas.dimensions()
    x = (canvas.width - val_w) // 2
    canvas.composite(value_canvas, x, 1)
    _draw_box(canvas, chars, x - 1, 0, x + val_w, val_h + 1)


def _connector_char(chars: BoxChars, under_parent: bool, above_child: bool) -> str:
    if under_parent and above_child:
        return chars.cross
    if under_parent:
        return chars.tee_up
    if above_child:
        return chars.tee_down
    return chars.horizontal


def _draw_connector_row(canvas: Canvas, chars: BoxChars, middles: List[int], center: int, y: int) -> None:
    first, last = middles[0], middles[-1]
    canvas.set(first, y, chars.top_left)
    canvas.set(last, y, chars.top_right)
    child_middles = set(middles)
    for x in range(first + 1, last):
        canvas.set(x, y, _connector_char(chars, x == center, x in child_middles))


def _draw_leaf(value_canvas: Canvas, chars: BoxChars) -> Canvas:
    val_w, val_h = value_canvas.dimensions()
    canvas = Canvas(_round_up_odd(val_w + 2), val_h + 2)
    canvas.composite(value_canvas, 1, 1)
    _draw_box(canvas, chars, 0, 0, val_w + 1, val_h + 1)
    return canvas


def _draw_single_child(value_canvas: Canvas, child: Canvas, chars: BoxChars) -> Canvas:
    val_w, val_h = value_canvas.dimensions()
    child_w, child_h = child.dimensions()
    width = _round_up_odd(max(val_w + 2, child_w))
    center = width // 2

    canvas = Canvas(width, val_h + 3 + child_h)
    _draw_boxed_value(canvas, chars, value_canvas)
    canvas.set(center, val_h + 1, chars.tee_down)
    canvas.set(center, val_h + 2, chars.vertical)
    canvas.composite(child, (width - child_w) // 2, val_h + 3)
    # after the child, which has its own box edge on that row
    canvas.set(center, val_h + 3, chars.tee_up)
    return canvas


def _draw_many_children(value_canvas: Canvas, children: List[Canvas], chars: BoxChars) -> Canvas:
    val_w, val_h = value_canvas.dimensions()

    strip = _ChildStrip()
    for index, child in enumerate(children):
        strip.append(child, last=index == len(children) - 1)

    parent_w = val_w + 2
    if parent_w > strip.width:
        width = parent_w
        strip.shift((parent_w - strip.width) // 2)
    else:
        width = strip.width
    center = width // 2

    canvas = Canvas(width, val_h + 3 + strip.height)
    _draw_boxed_value(canvas, chars, value_canvas)
    canvas.set(center, val_h + 1, chars.tee_down)
    for child, left in zip(strip.canvases, strip.lefts):
        canvas.composite(child, left, val_h + 3)
    for middle in strip.middles:
        canvas.set(middle, val_h + 3, chars.tee_up)
    _draw_connector_row(canvas, chars, strip.middles, center, val_h + 2)
    return canvas


def _draw_node(value_canvas: Canvas, children: List[Canvas], chars: BoxChars) -> Canvas:
    if not children:
        return _draw_leaf(value_canvas, chars)
    if len(children) == 1:
        return _draw_single_child(value_canvas, children[0], chars)
    return _draw_many_children(value_canvas, children, chars)


def _stringify(root: "Tree", chars: BoxChars, depth: Optional[int]) -> Canvas:
    # post-order walk with an explicit stack so depth is not bound by recursion;
    # finished canvases wait on ``drawn`` until their parent collects them
    drawn: List[Canvas] = []
    pending: List[Tuple["Tree", Optional[int], bool]] = [(root, depth, False)]

    while pending:
        node, node_depth, expanded = pending.pop()
        children: Tuple["Tree", ...] = () if node_depth == 0 else node.children

        if not expanded:
            pending.append((node, node_depth, True))
            child_depth = None if node_depth is None else node_depth - 1
            for child in reversed(children):
                pending.append((child, child_depth, False))
            continue

        first = len(drawn) - len(children)
        child_canvases = drawn[first:]
        del drawn[first:]
        drawn.append(_draw_node(node.value.draw(), child_canvases, chars))

    return drawn[0]


def stringify(
    node: "Tree",
    style: Optional[Union[str, BoxChars]] = None,
    depth: Optional[int] = None,
) -> Canvas:
    """Draw ``node`` and everything below it onto a single canvas.

    Children are drawn first and composed underneath the boxed value of
    their parent. ``depth`` cuts the subtree after that many levels; nodes
    at the cut are drawn as leaves.
    """
    if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth < 0):
        raise ConfigurationError("depth must be a non-negative integer when provided.")
    chars = resolve_box_chars(style)

    try:
        return _stringify(node, chars, depth)
    except CanvasError as exc:
        raise LayoutError(f"Drawing the tree produced an invalid canvas operation: {exc}") from exc
