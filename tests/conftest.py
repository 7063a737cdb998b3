"""Shared fixtures for the htmlsoup test suite."""

from pathlib import Path

import pytest

from htmlsoup import Soup
from htmlsoup.dom import Element, Text

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def three_sisters_html() -> str:
    return (DATA_DIR / "three_sisters.html").read_text(encoding="utf-8")


@pytest.fixture
def soup(three_sisters_html) -> Soup:
    """The canonical three-sisters document."""
    return Soup(three_sisters_html)


@pytest.fixture
def small_tree() -> Element:
    """A hand-built tree, independent of the parser.

    Structure:
    div
    ├── "a"
    ├── p
    │   ├── "b"
    │   └── span
    │       └── "c"
    └── ul
        └── li
            └── "d"
    """
    div = Element("div")
    div.append_child(Text("a"))
    p = div.append_child(Element("p"))
    p.append_child(Text("b"))
    span = p.append_child(Element("span"))
    span.append_child(Text("c"))
    ul = div.append_child(Element("ul"))
    li = ul.append_child(Element("li"))
    li.append_child(Text("d"))
    return div
