"""Unit tests for the tree builders."""

import random
from pathlib import Path

import pytest

from treedrawer import IntValue, TextValue, from_html, from_path, random_tree
from treedrawer.builders import DOCUMENT_LABEL, MAX_RANDOM_CHILDREN, MAX_RANDOM_VALUE
from treedrawer.errors import ConfigurationError


def labels(node):
    return [child.value.text for child in node.children]


def height(node):
    return 1 + max((height(child) for child in node.children), default=0)


class TestRandomTree:
    """Tests for random_tree."""

    def test_seeded_trees_are_identical(self):
        """The same seed gives the same drawing."""
        first = random_tree(4, random.Random(7)).render()
        second = random_tree(4, random.Random(7)).render()
        assert first == second

    @pytest.mark.parametrize("seed", range(10))
    def test_respects_bounds(self, seed):
        """Depth, fan-out and values stay inside their limits."""
        tree = random_tree(4, random.Random(seed))
        assert height(tree) <= 4
        for node in tree.walk():
            assert len(node.children) <= MAX_RANDOM_CHILDREN
            assert isinstance(node.value, IntValue)
            assert 0 <= node.value.value <= MAX_RANDOM_VALUE

    def test_single_layer_has_no_children(self):
        """One layer is just the root."""
        assert random_tree(1, random.Random(0)).children == ()

    @pytest.mark.parametrize("layers", [0, -2, True, 2.0])
    def test_invalid_layers(self, layers):
        """layers must be a positive int."""
        with pytest.raises(ConfigurationError):
            random_tree(layers)


class TestFromPath:
    """Tests for from_path."""

    def test_entries_sorted_and_hidden_skipped(self, sample_dir):
        """Entries are sorted by name and hidden ones left out."""
        tree = from_path(sample_dir)
        assert tree.value == TextValue(sample_dir.name)
        assert labels(tree) == ["a.txt", "b_dir"]
        assert labels(tree.child(1)) == ["inner.txt"]
        assert tree.child(0).children == ()

    def test_include_hidden(self, sample_dir):
        """Hidden entries are listed on request."""
        assert labels(from_path(sample_dir, include_hidden=True)) == [".hidden", "a.txt", "b_dir"]

    def test_single_file(self, sample_dir):
        """A file path is a single leaf."""
        tree = from_path(sample_dir / "a.txt")
        assert tree.value == TextValue("a.txt")
        assert tree.children == ()

    def test_unreadable_directory_is_a_leaf(self, sample_dir, monkeypatch):
        """A directory that cannot be listed is drawn without children."""
        iterdir = Path.iterdir

        def guarded_iterdir(self):
            if self.name == "b_dir":
                raise PermissionError(13, "Permission denied", str(self))
            return iterdir(self)

        monkeypatch.setattr(Path, "iterdir", guarded_iterdir)
        tree = from_path(sample_dir)
        assert labels(tree) == ["a.txt", "b_dir"]
        assert tree.child(1).children == ()

    def test_symlinked_directory_not_followed(self, tmp_path):
        """A link to a directory is listed but not entered."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "inside.txt").write_text("x", encoding="utf-8")
        (tmp_path / "link").symlink_to(real, target_is_directory=True)

        tree = from_path(tmp_path)
        assert labels(tree) == ["link", "real"]
        assert tree.child(0).children == ()
        assert labels(tree.child(1)) == ["inside.txt"]

    def test_missing_path(self, tmp_path):
        """A missing path raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            from_path(tmp_path / "nope")


class TestFromHtml:
    """Tests for from_html."""

    def test_fragment_with_several_tops(self, html_sample):
        """Several top-level nodes hang under a document root."""
        tree = from_html(html_sample)
        assert tree.value == TextValue(DOCUMENT_LABEL)
        assert labels(tree) == ["p", "ul"]
        assert labels(tree.child(0)) == ["Links:"]

    def test_unclosed_list_items_are_siblings(self, html_sample):
        """A new li closes the previous one."""
        items = from_html(html_sample).child(1)
        assert labels(items) == ["li", "li"]
        assert labels(items.child(0).child(0)) == ["Foo"]
        assert labels(items.child(1).child(0)) == ["BarBaz"]

    def test_single_top_element_is_root(self):
        """A fragment with one element is rooted at that element."""
        tree = from_html("<ul><li>x</li></ul>")
        assert tree.value == TextValue("ul")
        assert labels(tree.child(0)) == ["x"]

    def test_void_elements_and_blank_text(self):
        """Void elements take no children and blank text is dropped."""
        tree = from_html("<div>\n  <br>text <img src='a.png'/> </div>")
        assert labels(tree) == ["br", "text", "img"]
        assert tree.child(0).children == ()

    def test_renders(self, html_sample):
        """The element tree draws like any other tree."""
        lines = from_html(html_sample).render().split("\n")
        assert DOCUMENT_LABEL in lines[1]
