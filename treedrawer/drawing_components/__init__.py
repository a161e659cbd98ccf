from .core import STYLE_NAMES, BoxChars, resolve_box_chars
from .canvas import BLANK, Canvas
from .values import ComplexValue, FloatValue, IntValue, Renderable, TextValue, as_renderable
from .layout import stringify
from .node import Tree

__all__ = [
    "BoxChars",
    "STYLE_NAMES",
    "resolve_box_chars",
    "BLANK",
    "Canvas",
    "Renderable",
    "TextValue",
    "IntValue",
    "FloatValue",
    "ComplexValue",
    "as_renderable",
    "stringify",
    "Tree",
]
