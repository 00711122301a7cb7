"""bsui.core

Core helpers for a small FastHTML + Bootstrap 5 UI kit.

Runtime notes:
- Bootstrap CSS and the JS bundle are loaded from a CDN.
- The version and CDN base URL come from `bsui.config` (env / `.env`).
"""

from __future__ import annotations

from fasthtml.common import *

from .config import BOOTSTRAP_CDN

# -----------------------------------------------------------------------------
# Classname utilities
# -----------------------------------------------------------------------------


def cls_join(*classes: str | None) -> str:
    """Join class strings, filtering falsy values."""
    return " ".join(c for c in classes if c)


# Alias used in shadcn-style codebases
cn = cls_join


# -----------------------------------------------------------------------------
# CDN headers
# -----------------------------------------------------------------------------

bootstrap_link = Link(
    href=f"{BOOTSTRAP_CDN}/css/bootstrap.min.css",
    rel="stylesheet",
    type="text/css",
)

# The bundle includes Popper, needed by dropdowns, tooltips and popovers.
bootstrap_scr = Script(src=f"{BOOTSTRAP_CDN}/js/bootstrap.bundle.min.js")

bootstrap_hdrs = (bootstrap_link, bootstrap_scr)


def bootstrap_app(*, with_js: bool = True, **kw):
    """Create a FastHTML app with Bootstrap headers.

    Args:
        with_js: If False, only the stylesheet is injected (no toggle behaviour).
        **kw: Passed through to `fast_app`.

    Returns:
        (app, rt)
    """

    hdrs = kw.pop("hdrs", ())
    base_hdrs = bootstrap_hdrs if with_js else (bootstrap_link,)
    return fast_app(hdrs=(*base_hdrs, *hdrs), pico=False, **kw)
