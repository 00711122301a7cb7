"""bsui.utils.html

HTML helpers shared by components: encoding, id generation, class/style
merging and attribute normalisation.

Attribute mappings follow the FastHTML conventions:
- `cls` (and friends) means `class`
- underscores become hyphens (`data_bs_toggle` -> `data-bs-toggle`)
- `None` and `False` values are not rendered, `True` renders a bare attribute
"""

from __future__ import annotations

import html
import itertools
from collections.abc import Iterable, Mapping
from typing import Any

AttrValue = str | bool | int | float | None

_id_counter = itertools.count(1)

_ATTR_ALIASES = {
    "cls": "class",
    "_class": "class",
    "class_": "class",
    "klass": "class",
    "htmlClass": "class",
    "_for": "for",
    "fr": "for",
    "htmlFor": "for",
}


def encode(text: Any) -> str:
    """Escape `&`, `<`, `>` and both quote characters."""
    return html.escape(str(text), quote=True)


def generate_id(prefix: str = "i") -> str:
    """Return `prefix` followed by a counter that never repeats within the process."""
    return f"{prefix}{next(_id_counter)}"


def attr_name(key: str) -> str:
    if key in _ATTR_ALIASES:
        return _ATTR_ALIASES[key]
    return key.lstrip("_").replace("_", "-")


def normalize_attrs(attributes: Mapping[str, Any] | None = None, **kw) -> dict[str, Any]:
    """Merge a mapping and keyword attributes into one dict with HTML attribute names."""
    merged = {**(attributes or {}), **kw}
    out = {attr_name(k): v for k, v in merged.items()}
    classes = out.get("class")
    if classes is not None and not isinstance(classes, (str, Iterable)):
        raise TypeError(f"class must be a string or an iterable of strings, got {type(classes).__name__}")
    return out


def add_css_class(classes: Iterable[str] | None, *new) -> list[str]:
    """Order-preserving union of class names.

    Each item in `new` may be a class string (split on whitespace), an
    iterable of class strings, or None.
    """

    out: list[str] = list(classes or [])
    for item in new:
        if item is None:
            continue
        names = item.split() if isinstance(item, str) else add_css_class(None, *item)
        for name in names:
            if name not in out:
                out.append(name)
    return out


def css_style_to_dict(style: str) -> dict[str, str]:
    """Parse `"color: red; font-weight: bold"` into an ordered dict."""
    out: dict[str, str] = {}
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if sep and prop.strip():
            out[prop.strip()] = value.strip()
    return out


def css_style_from_dict(style: Mapping[str, Any]) -> str:
    return " ".join(f"{prop}: {value};" for prop, value in style.items() if value is not None)


def add_css_style(
    attributes: Mapping[str, Any],
    style: Mapping[str, Any] | str,
    overwrite: bool = True,
) -> dict[str, Any]:
    """Return a copy of `attributes` with `style` merged into its `style` entry.

    With `overwrite=False`, properties already present keep their value and
    only new properties are appended.
    """

    if not isinstance(style, (str, Mapping)):
        raise TypeError(f"style must be a string or a mapping, got {type(style).__name__}")

    out = dict(attributes)
    old = out.get("style")
    if not old:
        out["style"] = css_style_from_dict(style) if isinstance(style, Mapping) else style
        return out

    old_style = dict(old) if isinstance(old, Mapping) else css_style_to_dict(old)
    new_style = dict(style) if isinstance(style, Mapping) else css_style_to_dict(style)
    if not overwrite:
        new_style = {k: v for k, v in new_style.items() if k not in old_style}

    out["style"] = css_style_from_dict({**old_style, **new_style})
    return out


def clean_attrs(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Drop attributes that should not render and flatten mapping styles."""
    out: dict[str, Any] = {}
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if key == "style" and isinstance(value, Mapping):
            value = css_style_from_dict(value)
        out[key] = value
    return out
