from typing import List, Tuple

from wcwidth import wcwidth

from ..errors import CanvasOverflowError, InvalidDimensionError, OutOfBoundsError

BLANK = ""


class Canvas:
    """Fixed-size grid of characters.

    Each cell holds one code point or ``BLANK``. A canvas is never empty:
    a zero width or height is raised to one.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise InvalidDimensionError(
                f"Canvas dimensions must not be negative, got ({width}, {height})."
            )
        self.width = max(width, 1)
        self.height = max(height, 1)
        self.grid: List[List[str]] = [[BLANK for _ in range(self.width)] for _ in range(self.height)]

    @classmethod
    def from_string(cls, text: str) -> "Canvas":
        lines = text.split("\n")
        canvas = cls(max(len(line) for line in lines), len(lines))
        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                canvas.set(x, y, char)
        return canvas

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"Position ({x}, {y}) is outside the canvas of dimensions "
                f"({self.width}, {self.height})."
            )

    def set(self, x: int, y: int, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"A cell holds exactly one character, got {char!r}.")
        self._check_bounds(x, y)
        self.grid[y][x] = char

    def get(self, x: int, y: int) -> str:
        self._check_bounds(x, y)
        return self.grid[y][x]

    def composite(self, source: "Canvas", x: int, y: int) -> None:
        """Copy ``source`` with its top-left corner at ``(x, y)``.

        Blank source cells overwrite the destination too.
        """
        if (
            x < 0
            or y < 0
            or x + source.width - 1 >= self.width
            or y + source.height - 1 >= self.height
        ):
            raise CanvasOverflowError(
                f"Canvas of dimensions ({source.width}, {source.height}) drawn at "
                f"({x}, {y}) overflows canvas of dimensions ({self.width}, {self.height})."
            )
        for row_index, row in enumerate(source.grid):
            self.grid[y + row_index][x : x + source.width] = row

    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def display_width(self) -> int:
        widest = 0
        for row in self.grid:
            widest = max(widest, sum(max(wcwidth(char), 1) if char else 1 for char in row))
        return widest

    def render(self) -> str:
        return "\n".join("".join(char or " " for char in row) for row in self.grid)

    def __str__(self) -> str:
        return self.render()
