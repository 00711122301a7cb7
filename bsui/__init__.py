"""bsui

FastHTML + Bootstrap 5 UI kit.

Suggested usage:

    from bsui import Button, ButtonVariant

    Button().label("Save").variant(ButtonVariant.PRIMARY).render()

Structure:
- `bsui.core`: class helpers, CDN headers and `bootstrap_app`
- `bsui.components`: components (Button, ...)
- `bsui.utils`: HTML encoding, id generation, class/style merging
"""

from .core import bootstrap_app, bootstrap_hdrs, cls_join, cn
from .components import Button, ButtonConfig, ButtonType, ButtonVariant, ToggleType

__all__ = [
    # Core
    "bootstrap_app",
    "bootstrap_hdrs",
    "cls_join",
    "cn",
    # Buttons
    "Button",
    "ButtonConfig",
    "ButtonType",
    "ButtonVariant",
    "ToggleType",
]
