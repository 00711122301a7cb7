"""bsui.utils

Utility functions for the UI library.
"""

from .html import (
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

__all__ = [
    "add_css_class",
    "add_css_style",
    "attr_name",
    "clean_attrs",
    "css_style_from_dict",
    "css_style_to_dict",
    "encode",
    "generate_id",
    "normalize_attrs",
]
