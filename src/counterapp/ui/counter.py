"""Counter page components."""

from fasthtml.common import Button, Div, H1, Main, P, Script, Span, Title

from ..core import CounterViewModel

datastar_script = Script(src="https://cdn.jsdelivr.net/gh/starfederation/datastar@v1.0.0-beta.11/bundles/datastar.js", type="module")


def counter_view(view_model: CounterViewModel, prefix: str = "/counter"):
    """Count display bound to the count signal and a button bound to the increment command."""
    command = view_model.increment_command
    return Div(
        view_model,
        Div(
            Span(data_text=type(view_model).Scount, id="count", cls="counter-value"),
            cls="counter-display",
        ),
        Button(
            "+1",
            data_on_click=f"@post('{prefix}/increment')",
            disabled=not command.can_execute(),
            id="increment",
        ),
        cls="counter",
    )


def counter_page(view_model: CounterViewModel, prefix: str = "/counter"):
    """Full counter page. Opens the live stream on load."""
    return (
        Title("Counter"),
        Main(
            H1("Counter"),
            P("Click the button to increment the count. Open a second tab to watch it follow."),
            counter_view(view_model, prefix),
            Div(data_on_load=f"@get('{prefix}/live')"),
            id="content",
        ),
    )
