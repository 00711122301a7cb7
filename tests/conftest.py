from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser

import pytest


@dataclass
class Element:
    tag: str
    attrs: dict[str, str | None]
    text: str = ""
    classes: list[str] = field(default_factory=list)


class _FirstElement(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.element: Element | None = None
        self._text: list[str] = []

    def handle_starttag(self, tag, attrs):
        if self.element is None:
            mapping = dict(attrs)
            self.element = Element(tag, mapping, classes=(mapping.get("class") or "").split())

    def handle_data(self, data):
        self._text.append(data)

    def handle_entityref(self, name):
        self._text.append(f"&{name};")

    def handle_charref(self, name):
        self._text.append(f"&#{name};")


def parse(html: str) -> Element:
    """Parse the outermost element of a rendered fragment."""
    parser = _FirstElement()
    parser.feed(html)
    parser.close()
    assert parser.element is not None, html
    parser.element.text = "".join(parser._text).strip()
    return parser.element


@pytest.fixture
def parse_html():
    return parse
