import sys

from rich import print

from treedrawer import from_path


def main() -> None:
    target = sys.argv[1] if len(sys.argv) > 1 else "."
    print(from_path(target).render())


if __name__ == "__main__":
    main()
