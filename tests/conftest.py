"""Pytest configuration and shared fixtures for treedrawer tests."""

import pytest

from treedrawer import Tree


@pytest.fixture
def leaf():
    """Single node without children."""
    return Tree("x")


@pytest.fixture
def chain():
    """Root with exactly one child."""
    root = Tree("a")
    root.add_child("b")
    return root


@pytest.fixture
def pair():
    """Root with two leaf children."""
    root = Tree("a")
    root.add_child("b")
    root.add_child("c")
    return root


@pytest.fixture
def triple():
    """Root with three leaf children."""
    root = Tree("a")
    for label in ("b", "c", "d"):
        root.add_child(label)
    return root


@pytest.fixture
def sample_dir(tmp_path):
    """Small directory tree with one hidden entry."""
    (tmp_path / "b_dir").mkdir()
    (tmp_path / "b_dir" / "inner.txt").write_text("inner", encoding="utf-8")
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / ".hidden").write_text("secret", encoding="utf-8")
    return tmp_path


@pytest.fixture
def html_sample():
    """HTML fragment with two top-level elements and unclosed list items."""
    return '<p>Links:</p><ul><li><a href="foo">Foo</a><li><a href="/bar/baz">BarBaz</a></ul>'
