from __future__ import annotations

from fasthtml.common import to_xml

from bsui.config import BOOTSTRAP_CDN
from bsui.core import bootstrap_app, bootstrap_hdrs, cls_join, cn


def test_cls_join_filters_falsy_values() -> None:
    assert cls_join("btn", "", None, "btn-lg") == "btn btn-lg"
    assert cn is cls_join


def test_bootstrap_headers_point_at_configured_cdn() -> None:
    html = "".join(to_xml(h) for h in bootstrap_hdrs)

    assert f"{BOOTSTRAP_CDN}/css/bootstrap.min.css" in html
    assert f"{BOOTSTRAP_CDN}/js/bootstrap.bundle.min.js" in html


def test_bootstrap_app_returns_app_and_router() -> None:
    app, rt = bootstrap_app(with_js=False)

    assert app is not None
    assert callable(rt)
