"""bsui.components.button

Bootstrap 5 button rendered as `<button>`, `<a>` or `<input>`.

The builder is immutable: every configuration call returns a new `Button`
wrapping a new frozen `ButtonConfig`, so a half-configured button can be
shared and specialised freely.

    Button().label("Save").variant(ButtonVariant.PRIMARY).large_size().render()
    Button.as_link("Docs", "/docs").disabled().render()

See https://getbootstrap.com/docs/5.3/components/buttons/
"""

from __future__ import annotations

import logging
from enum import Enum
from html import unescape
from typing import Any, Literal, Mapping, Optional

from fasthtml.common import FT, NotStr, to_xml
from pydantic import BaseModel, ConfigDict, Field

from ..core import cls_join
from ..utils.html import (
    AttrValue,
    add_css_class,
    add_css_style,
    clean_attrs,
    encode as encode_html,
    generate_id,
    normalize_attrs,
)

logger = logging.getLogger(__name__)


class ButtonVariant(str, Enum):
    """Visual style. The value is the CSS class it contributes."""

    PRIMARY = "btn-primary"
    SECONDARY = "btn-secondary"
    SUCCESS = "btn-success"
    DANGER = "btn-danger"
    WARNING = "btn-warning"
    INFO = "btn-info"
    LIGHT = "btn-light"
    DARK = "btn-dark"
    LINK = "btn-link"
    OUTLINE_PRIMARY = "btn-outline-primary"
    OUTLINE_SECONDARY = "btn-outline-secondary"
    OUTLINE_SUCCESS = "btn-outline-success"
    OUTLINE_DANGER = "btn-outline-danger"
    OUTLINE_WARNING = "btn-outline-warning"
    OUTLINE_INFO = "btn-outline-info"
    OUTLINE_LIGHT = "btn-outline-light"
    OUTLINE_DARK = "btn-outline-dark"

    @classmethod
    def _missing_(cls, value):
        # Allow "primary" / "outline-primary" as shorthands.
        if isinstance(value, str):
            return cls.__members__.get(value.upper().replace("-", "_"))
        return None


class ButtonType(str, Enum):
    """Which element family `render` produces."""

    BUTTON = "button"
    LINK = "link"
    RESET = "reset"
    RESET_INPUT = "reset-input"
    SUBMIT = "submit"
    SUBMIT_INPUT = "submit-input"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls.__members__.get(value.upper().replace("-", "_"))
        return None


# Common `data-bs-toggle` values. Any other string is passed through as-is.
ToggleType = Literal["button", "dropdown", "modal", "tooltip", "popover", "collapse"]


# tag kind -> (element name, fixed attributes)
_TAGS: dict[ButtonType, tuple[str, dict[str, str]]] = {
    ButtonType.BUTTON: ("button", {"type": "button"}),
    ButtonType.LINK: ("a", {}),
    ButtonType.RESET: ("button", {"type": "reset"}),
    ButtonType.RESET_INPUT: ("input", {"type": "reset"}),
    ButtonType.SUBMIT: ("button", {"type": "submit"}),
    ButtonType.SUBMIT_INPUT: ("input", {"type": "submit"}),
}


def _new_button_id() -> str:
    return generate_id("btn-")


class ButtonConfig(BaseModel):
    """Snapshot of everything a `Button` has been told.

    Attributes:
        label: Content (already encoded if requested)
        attributes: HTML attributes; None means "not rendered"
        css_classes: Class slots. String keys are named slots (size, active, ...),
            int keys come from `add_class`/`set_classes`. None clears a slot.
        disabled: Disabled flag
        id: True = generate, False or "" = omit, other strings = explicit id
        variant: Visual style, None for no variant class
        tag: Element family
        generated_id: Id used when `id` is True and no id attribute is set.
            Fixed when the snapshot is created.
    """

    model_config = ConfigDict(frozen=True)

    label: str = ""
    attributes: dict[str, AttrValue] = {}
    css_classes: dict[str | int, Optional[str]] = {}
    disabled: bool = False
    id: bool | str = True
    variant: Optional[ButtonVariant] = ButtonVariant.SECONDARY
    tag: ButtonType = ButtonType.BUTTON
    generated_id: str = Field(default_factory=_new_button_id)


class Button:
    """Fluent, immutable Bootstrap button builder."""

    NAME = "btn"

    __slots__ = ("config",)

    def __init__(self, config: ButtonConfig | None = None):
        self.config = config if config is not None else ButtonConfig()

    def __repr__(self) -> str:
        return f"Button({self.config!r})"

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def as_link(cls, label: Any = "", url: str | None = None) -> Button:
        """Anchor styled as a button."""
        return cls().label(label).type(ButtonType.LINK).url(url)

    @classmethod
    def as_reset_input(cls, value: Any = "Reset") -> Button:
        return cls().label(value).type(ButtonType.RESET_INPUT)

    @classmethod
    def as_submit_input(cls, value: Any = "Submit") -> Button:
        return cls().label(value).type(ButtonType.SUBMIT_INPUT)

    @classmethod
    def as_reset(cls, value: Any = "Reset") -> Button:
        return cls().label(value).type(ButtonType.RESET)

    @classmethod
    def as_submit(cls, value: Any = "Submit") -> Button:
        return cls().label(value).type(ButtonType.SUBMIT)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def _with(self, **update) -> Button:
        # Every new snapshot gets its own id.
        update.setdefault("generated_id", _new_button_id())
        return type(self)(self.config.model_copy(update=update))

    def _set_attribute(self, name: str, value: AttrValue) -> Button:
        return self._with(attributes={**self.config.attributes, name: value})

    def _set_slot(self, slot: str, value: str | None) -> Button:
        return self._with(css_classes={**self.config.css_classes, slot: value})

    def active(self, enabled: bool = True) -> Button:
        """Pressed toggle state: `data-bs-toggle`, `aria-pressed` and the `active` class."""
        new = self.toggle("button" if enabled else None)
        return new._with(
            attributes={**new.config.attributes, "aria-pressed": "true" if enabled else None},
            css_classes={**new.config.css_classes, "active": "active" if enabled else None},
        )

    def add_attributes(self, attributes: Mapping[str, AttrValue] | None = None, **kw) -> Button:
        """Merge attributes into the existing ones (later values win).

        Keyword names follow FastHTML: `cls` -> `class`, `data_bs_target` -> `data-bs-target`.
        """
        return self._with(attributes={**self.config.attributes, **normalize_attrs(attributes, **kw)})

    def set_attributes(self, attributes: Mapping[str, AttrValue] | None = None, **kw) -> Button:
        """Replace all attributes."""
        return self._with(attributes=normalize_attrs(attributes, **kw))

    def add_class(self, *classes: str | None) -> Button:
        """Append classes. None entries are kept and skipped at render time."""
        slots = dict(self.config.css_classes)
        start = max((key for key in slots if isinstance(key, int)), default=-1) + 1
        slots.update(enumerate(classes, start))
        return self._with(css_classes=slots)

    def set_classes(self, *classes: str | None) -> Button:
        """Replace all classes, including named slots such as size and active."""
        return self._with(css_classes=dict(enumerate(classes)))

    def add_css_style(self, style: Mapping[str, Any] | str, overwrite: bool = True) -> Button:
        """Merge CSS declarations into the `style` attribute.

        Args:
            style: `{"color": "red"}` or `"color: red;"`
            overwrite: If False, properties that are already set keep their value.
        """
        return self._with(attributes=add_css_style(self.config.attributes, style, overwrite))

    def aria_expanded(self, enabled: bool = True) -> Button:
        return self._set_attribute("aria-expanded", "true" if enabled else "false")

    def disable_text_wrapping(self) -> Button:
        return self._set_slot("text-nowrap", "text-nowrap")

    def disabled(self, enabled: bool = True) -> Button:
        return self._with(disabled=enabled)

    def id(self, value: bool | str) -> Button:
        """True generates an id, False or "" omits it, a string is used as given."""
        return self._with(id=value)

    def label(self, text: Any, encode: bool = True) -> Button:
        """Set the content.

        Args:
            text: Text, markup, or a FastHTML element (serialised with `to_xml`).
            encode: HTML-encode the text. Pass False only for trusted markup.
        """
        if isinstance(text, FT) or hasattr(text, "__ft__"):
            text = to_xml(text).strip()
        text = str(text)
        if encode:
            text = encode_html(text)
        return self._with(label=text)

    def large_size(self) -> Button:
        return self._set_slot("size", "btn-lg")

    def normal_size(self) -> Button:
        return self._set_slot("size", None)

    def small_size(self) -> Button:
        return self._set_slot("size", "btn-sm")

    def toggle(self, type: ToggleType | str | None = "button") -> Button:
        """Set `data-bs-toggle` (button, dropdown, modal, ...). None removes it."""
        return self._set_attribute("data-bs-toggle", type)

    def type(self, value: ButtonType | str) -> Button:
        """Switch the element family. Attributes, classes and label are kept."""
        return self._with(tag=ButtonType(value))

    def url(self, value: str | None) -> Button:
        return self._set_attribute("href", value)

    def variant(self, value: ButtonVariant | str | None) -> Button:
        return self._with(variant=ButtonVariant(value) if value is not None else None)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _resolve_id(self, attribute_id: AttrValue) -> str | None:
        policy = self.config.id
        if policy is True:
            if attribute_id is not None:
                return str(attribute_id)
            return self.config.generated_id
        if policy is False or policy == "":
            return None
        return str(policy)

    def __ft__(self) -> FT:
        cfg = self.config
        attributes = dict(cfg.attributes)
        extra_classes = attributes.pop("class", None)
        button_id = self._resolve_id(attributes.pop("id", None))
        tag, tag_attrs = _TAGS[cfg.tag]
        is_link = tag == "a"

        classes = add_css_class(None, self.NAME, cfg.variant.value if cfg.variant else None, extra_classes)

        if cfg.disabled:
            if is_link:
                # Anchors have no native disabled state.
                attributes.pop("disabled", None)
                attributes["aria-disabled"] = "true"
                classes = add_css_class(classes, "disabled")
            else:
                attributes["disabled"] = True

        if is_link and attributes.get("role") is None:
            attributes["role"] = "button"

        classes = add_css_class(classes, *cfg.css_classes.values())
        attrs = {**tag_attrs, "id": button_id, "class": cls_join(*classes), **attributes}

        logger.debug("render %s as <%s> id=%s", cfg.tag.value, tag, button_id)

        if tag == "input":
            if cfg.label != "":
                # The attribute serialiser escapes values itself.
                attrs["value"] = unescape(cfg.label)
            return FT(tag, (), clean_attrs(attrs), void_=True)

        children = (NotStr(cfg.label),) if cfg.label else ()
        return FT(tag, children, clean_attrs(attrs))

    def render(self) -> str:
        """Return the HTML for this button."""
        return to_xml(self.__ft__())

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()


__all__ = ["Button", "ButtonConfig", "ButtonType", "ButtonVariant", "ToggleType"]
