"""Tests for list-aware attribute matching."""

import pytest

from htmlsoup.dom import Element
from htmlsoup.query.attribute import is_list_attribute, list_aware_match, match_token_list
from htmlsoup.query.pattern import ANY, Literal, regex


def element(tag, **attrs):
    el = Element(tag)
    for name, value in attrs.items():
        el.set_attribute(name.replace("_", "-"), value)
    return el


@pytest.mark.parametrize("tag,attr", [
    ("div", "class"),
    ("span", "accesskey"),
    ("section", "dropzone"),
    ("a", "rel"),
    ("a", "rev"),
    ("link", "rel"),
    ("link", "rev"),
    ("tr", "headers"),
    ("th", "headers"),
    ("form", "accept-charset"),
    ("object", "archive"),
    ("area", "rel"),
    ("icon", "sizes"),
    ("iframe", "sandbox"),
    ("output", "for"),
])
def test_list_attributes(tag, attr):
    assert is_list_attribute(tag, attr)


@pytest.mark.parametrize("tag,attr", [
    ("div", "id"),
    ("div", "rel"),
    ("td", "headers"),
    ("label", "for"),
    ("a", "href"),
    ("img", "sizes"),
])
def test_single_value_attributes(tag, attr):
    assert not is_list_attribute(tag, attr)


def test_list_rule_ignores_case():
    assert is_list_attribute("A", "REL")
    assert is_list_attribute("div", "Class")
    assert is_list_attribute("IFRAME", "SandBox")


def test_token_list_splits_on_ascii_whitespace():
    assert match_token_list(Literal("bar"), "foo\tbar\nbaz")
    assert match_token_list(Literal("baz"), "  foo   baz  ")
    assert match_token_list(Literal(""), "foo  bar")
    assert not match_token_list(Literal(""), "foo bar")
    # A non-breaking space is not a separator
    assert not match_token_list(Literal("foo"), "foo\u00a0bar")


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_value_without_tokens_is_the_empty_token(value):
    assert match_token_list(ANY, value)
    assert match_token_list(Literal(""), value)
    assert not match_token_list(Literal("foo"), value)


def test_empty_class_still_has_the_attribute():
    p = element("p", **{"class": ""})
    assert list_aware_match(p, Literal("class"), ANY)
    assert not list_aware_match(p, Literal("class"), Literal("x"))


def test_class_matches_any_token():
    p = element("p", **{"class": "foo bar"})
    assert list_aware_match(p, Literal("class"), Literal("foo"))
    assert list_aware_match(p, Literal("class"), Literal("bar"))
    assert not list_aware_match(p, Literal("class"), Literal("foo bar baz"))


def test_whole_value_on_list_attribute_does_not_match():
    p = element("p", **{"class": "foo bar"})
    assert not list_aware_match(p, Literal("class"), Literal("foo bar"))


def test_single_value_attribute_requires_exact_match():
    div = element("div", id="baz quux")
    assert not list_aware_match(div, Literal("id"), Literal("baz"))
    assert list_aware_match(div, Literal("id"), Literal("baz quux"))


def test_rel_is_only_a_list_on_links():
    a = element("a", rel="nofollow noopener")
    div = element("div", rel="nofollow noopener")
    assert list_aware_match(a, Literal("rel"), Literal("noopener"))
    assert not list_aware_match(div, Literal("rel"), Literal("noopener"))


def test_upper_case_names_still_use_the_list_rule():
    a = Element("A")
    a.set_attribute("REL", "x y")
    assert list_aware_match(a, Literal("REL"), Literal("y"))


def test_name_pattern_decides_name_comparison():
    div = element("div", id="main")
    assert not list_aware_match(div, Literal("ID"), Literal("main"))
    assert list_aware_match(div, regex("(?i)^id$"), Literal("main"))


def test_wildcards():
    div = element("div", id="main", title="x")
    assert list_aware_match(div, Literal("title"), ANY)
    assert list_aware_match(div, ANY, Literal("main"))
    assert not list_aware_match(div, Literal("lang"), ANY)
    assert not list_aware_match(element("div"), ANY, ANY)


def test_name_and_value_must_match_the_same_attribute():
    div = element("div", id="x", title="main")
    assert not list_aware_match(div, Literal("id"), Literal("main"))
