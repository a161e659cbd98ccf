from rich import print

from treedrawer import from_html

SAMPLE = '<p>Links:</p><ul><li><a href="foo">Foo</a><li><a href="/bar/baz">BarBaz</a></ul>'


def main() -> None:
    print(from_html(SAMPLE).render())


if __name__ == "__main__":
    main()
