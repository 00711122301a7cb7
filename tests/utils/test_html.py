from __future__ import annotations

import pytest

from bsui.utils import (
    add_css_class,
    add_css_style,
    attr_name,
    clean_attrs,
    css_style_from_dict,
    css_style_to_dict,
    encode,
    generate_id,
    normalize_attrs,
)


def test_encode_escapes_markup_and_quotes() -> None:
    assert encode('<a href="x">\'&') == "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;"


def test_generate_id_is_unique_and_prefixed() -> None:
    ids = {generate_id("btn-") for _ in range(100)}

    assert len(ids) == 100
    assert all(i.startswith("btn-") for i in ids)


def test_attr_name_follows_fasthtml_conventions() -> None:
    assert attr_name("cls") == "class"
    assert attr_name("_for") == "for"
    assert attr_name("data_bs_toggle") == "data-bs-toggle"
    assert attr_name("aria-label") == "aria-label"


def test_normalize_attrs_merges_mapping_and_keywords() -> None:
    assert normalize_attrs({"title": "a"}, title="b", hx_get="/x") == {"title": "b", "hx-get": "/x"}
    assert normalize_attrs() == {}


def test_add_css_class_keeps_order_and_drops_duplicates() -> None:
    assert add_css_class(["btn"], "btn-primary btn", None, ["a", None, "b"], "a") == [
        "btn",
        "btn-primary",
        "a",
        "b",
    ]


def test_css_style_round_trip_of_declarations() -> None:
    assert css_style_to_dict("color: red; font-weight:bold;;") == {"color": "red", "font-weight": "bold"}
    assert css_style_from_dict({"color": "red", "margin": None, "padding": 0}) == "color: red; padding: 0;"


def test_add_css_style_returns_new_mapping() -> None:
    attrs = {"style": "color: red;"}

    out = add_css_style(attrs, {"margin": "0"})

    assert out == {"style": "color: red; margin: 0;"}
    assert attrs == {"style": "color: red;"}


def test_add_css_style_without_existing_style_keeps_string_as_is() -> None:
    assert add_css_style({}, "color: red") == {"style": "color: red"}


def test_add_css_style_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        add_css_style({}, ["color: red"])


def test_clean_attrs_drops_false_and_none() -> None:
    assert clean_attrs({"a": None, "b": False, "c": True, "style": {"color": "red"}, "d": ""}) == {
        "c": True,
        "style": "color: red;",
        "d": "",
    }


def test_normalize_attrs_accepts_class_strings_and_lists() -> None:
    assert normalize_attrs(cls="a b") == {"class": "a b"}
    assert normalize_attrs({"class": ["a", "b"]}) == {"class": ["a", "b"]}
    with pytest.raises(TypeError):
        normalize_attrs(cls=1)
