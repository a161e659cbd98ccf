from dataclasses import dataclass, replace
from typing import Dict, Optional, Union

from ..errors import ConfigurationError


@dataclass(frozen=True)
class BoxChars:
    """Glyphs for value boxes and the connectors between them."""

    top_left: str = "╭"
    top_right: str = "╮"
    bottom_left: str = "╰"
    bottom_right: str = "╯"

    horizontal: str = "─"
    vertical: str = "│"

    tee_down: str = "┬"
    tee_up: str = "┴"
    cross: str = "┼"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        name = _STYLE_ALIASES.get(style.lower().strip())
        if name is None:
            raise ValueError(f"Unknown box style: {style}")
        return _PRESETS[name]


_ROUNDED = BoxChars()
_SQUARE = replace(_ROUNDED, top_left="┌", top_right="┐", bottom_left="└", bottom_right="┘")
_JOINTS = ("top_left", "top_right", "bottom_left", "bottom_right", "tee_down", "tee_up", "cross")
_ASCII = replace(_ROUNDED, horizontal="-", vertical="|", **{joint: "+" for joint in _JOINTS})

_PRESETS: Dict[str, BoxChars] = {"rounded": _ROUNDED, "square": _SQUARE, "ascii": _ASCII}
_STYLE_ALIASES: Dict[str, str] = {
    "rounded": "rounded",
    "round": "rounded",
    "modern": "rounded",
    "square": "square",
    "line": "square",
    "box": "square",
    "ascii": "ascii",
    "plain": "ascii",
}

STYLE_NAMES = tuple(_PRESETS)


def resolve_box_chars(style: Optional[Union[str, BoxChars]] = None) -> BoxChars:
    if isinstance(style, BoxChars):
        return style
    style_key = style or "rounded"
    if not isinstance(style_key, str):
        raise ConfigurationError("style must be a string or BoxChars instance.")
    try:
        return BoxChars.for_style(style_key)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
