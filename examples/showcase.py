from rich import print

from treedrawer import Tree


def build_showcase() -> Tree:
    tree = Tree(9)
    tree.add_child("I can handle strings")
    numbers = tree.add_child(1)
    tree.add_child(2)
    tree.add_child(3)
    tree.add_child(4)

    numbers.add_child(124)
    numbers.add_child(13)
    numbers.add_child("a string")

    current = tree.child(0)
    for text in (
        "with as many children as you want",
        "with as many layers as you want",
        "actually I can handle everything...",
        "...that defines draw()",
    ):
        current = current.add_child(text)

    return current


def main() -> None:
    leaf = build_showcase()
    print("[bold cyan]Whole tree, rendered from a leaf:[/bold cyan]\n")
    print(str(leaf))

    print("\n" + "=" * 40 + "\n")

    print("[bold green]Subtree of 1 (depth=1):[/bold green]\n")
    print(leaf.root().child(1).render_subtree(depth=1))


if __name__ == "__main__":
    main()
