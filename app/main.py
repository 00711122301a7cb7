import argparse

from fasthtml.common import Div, H2, P, Titled, serve

from bsui import Button, ButtonType, ButtonVariant, bootstrap_app

app, rt = bootstrap_app()


def _section(title: str, *buttons):
    return Div(
        H2(title, cls="h5 mt-4"),
        Div(*buttons, cls="d-flex flex-wrap gap-2"),
        data_slot="gallery-section",
    )


def _variants():
    return _section(
        "Variants",
        *(Button().label(v.name.replace("_", " ").title()).variant(v) for v in ButtonVariant),
    )


def _sizes():
    base = Button().variant(ButtonVariant.PRIMARY)
    return _section(
        "Sizes",
        base.label("Small").small_size(),
        base.label("Normal").normal_size(),
        base.label("Large").large_size(),
    )


def _states():
    return _section(
        "States",
        Button().label("Active").active(),
        Button().label("Disabled").disabled(),
        Button.as_link("Disabled link", "#").disabled(),
        Button().label("Dropdown").toggle("dropdown").aria_expanded(False),
        Button().label("A label that does not wrap").disable_text_wrapping(),
    )


def _forms():
    return _section(
        "Links and form controls",
        Button.as_link("Link", "/").variant(ButtonVariant.LINK),
        Button.as_submit().variant(ButtonVariant.SUCCESS),
        Button.as_reset().variant(ButtonVariant.OUTLINE_DANGER),
        Button.as_submit_input("Send"),
        Button.as_reset_input(),
        Button().label("Input from a button").type(ButtonType.SUBMIT_INPUT),
    )


@rt("/")
def index():
    return Titled(
        "Buttons",
        P("Bootstrap buttons rendered server-side.", cls="text-body-secondary"),
        _variants(),
        _sizes(),
        _states(),
        _forms(),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--port", type=int, default=5001)
    args = parser.parse_args()
    serve(port=args.port)
