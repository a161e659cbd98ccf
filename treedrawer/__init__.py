from .tree_drawer import *
from .errors import *

__version__ = "0.1.0"
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
    "TreeDrawerError",
    "ConfigurationError",
    "CanvasError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "CanvasOverflowError",
    "LayoutError",
    "NodeNotFoundError",
]
