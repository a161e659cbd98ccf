from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from ..errors import ConfigurationError
from .canvas import Canvas


@runtime_checkable
class Renderable(Protocol):
    """Anything that can draw itself as a canvas to be boxed on the tree."""

    def draw(self) -> Canvas:
        ...


@dataclass(frozen=True)
class TextValue:
    text: str

    def draw(self) -> Canvas:
        return Canvas.from_string(self.text)


@dataclass(frozen=True)
class IntValue:
    value: int

    def draw(self) -> Canvas:
        return TextValue(str(self.value)).draw()


@dataclass(frozen=True)
class FloatValue:
    value: float

    def draw(self) -> Canvas:
        return TextValue(repr(self.value)).draw()


@dataclass(frozen=True)
class ComplexValue:
    value: complex

    def draw(self) -> Canvas:
        return TextValue(str(self.value)).draw()


ValueLike = Union[Renderable, str, int, float, complex]


def as_renderable(value: ValueLike) -> Renderable:
    # checked before int, bool subclasses it
    if isinstance(value, bool):
        return TextValue(str(value))
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, int):
        return IntValue(value)
    if isinstance(value, float):
        return FloatValue(value)
    if isinstance(value, complex):
        return ComplexValue(value)
    if isinstance(value, Renderable):
        return value
    raise ConfigurationError(
        f"Tree values must be str, int, float, complex or define draw(), got {type(value).__name__}."
    )
