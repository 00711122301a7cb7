"""bsui.components

Bootstrap components built on FastHTML elements.

    from bsui.components import Button, ButtonVariant

Most code will use the top-level re-exports:

    from bsui import Button
"""

from .button import Button, ButtonConfig, ButtonType, ButtonVariant, ToggleType

__all__ = [
    "Button",
    "ButtonConfig",
    "ButtonType",
    "ButtonVariant",
    "ToggleType",
]
