from .builders import from_html, from_path, random_tree
from .drawing_components import (
    BLANK,
    BoxChars,
    Canvas,
    ComplexValue,
    FloatValue,
    IntValue,
    Renderable,
    TextValue,
    Tree,
    stringify,
)

__all__ = [
    "Tree",
    "Canvas",
    "BLANK",
    "BoxChars",
    "Renderable",
    "TextValue",
    "IntValue",
    "FloatValue",
    "ComplexValue",
    "stringify",
    "random_tree",
    "from_path",
    "from_html",
]
