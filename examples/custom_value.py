import random

from rich import print

from treedrawer import Canvas, Tree


class Block:
    """A value drawn as a filled rectangle of random size."""

    def __init__(self, rng: random.Random) -> None:
        self.width = rng.randint(1, 6)
        self.height = rng.randint(1, 6)

    def draw(self) -> Canvas:
        canvas = Canvas(self.width, self.height)
        for x in range(self.width):
            for y in range(self.height):
                canvas.set(x, y, "*")
        return canvas


def block_tree(depth: int, rng: random.Random) -> Tree:
    root = Tree(Block(rng))

    def grow(node: Tree, remaining: int) -> None:
        if remaining <= 1:
            return
        for _ in range(rng.randrange(remaining)):
            grow(node.add_child(Block(rng)), remaining - 1)

    grow(root, depth)
    return root


def main() -> None:
    print(block_tree(5, random.Random()).render(style="square"))


if __name__ == "__main__":
    main()
