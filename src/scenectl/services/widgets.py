"""WidgetService: the chain-of-responsibility window demo."""

from __future__ import annotations

from scenectl.services.base import BaseService
from scenectl.services.result import ServiceResult
from scenectl.services.telemetry import trace_span, traced
from scenectl.widgets import (
    Button,
    CompositeControl,
    EventRequest,
    Label,
    MainWindow,
    PressListener,
    UIComponent,
)


def build_demo_window() -> tuple[MainWindow, Button]:
    """Login, password and print frames side by side; returns the print button too."""
    window = MainWindow()
    login = CompositeControl().add(Label("Login")).add(Button("OK"))
    password = CompositeControl().add(Label("Password")).add(Button("Verify"))
    print_button = Button("Print")
    window.add(login).add(password).add(CompositeControl().add(print_button))
    return window, print_button


class WidgetService(BaseService):
    @traced
    def run_demo(self) -> ServiceResult:
        """Render the demo window, then press Print and record who handled it.

        Neither button listener consumes the request, so it climbs through
        the print frame to the window's own listener.
        """
        window, print_button = build_demo_window()
        events: list[str] = []

        def recorder(message: str) -> PressListener:
            def listener(_sender: UIComponent, _request: EventRequest) -> None:
                events.append(message)

            return listener

        window.add_press_listener(recorder("MainWin handler"))
        print_button.add_press_listener(recorder("Button press first handler"))

        with trace_span("render"):
            layout = window.render()

        print_button.add_press_listener(recorder("Button press second handler"))

        events.append("Button pressed")
        request = print_button.press()

        warnings: list[str] = []
        self._dispatch_render("widgets_demo", "widgets", len(layout), warnings)
        return ServiceResult(
            ok=True,
            op="widgets_demo",
            data={
                "layout": layout,
                "events": events,
                "handled": request.handled,
                "width": window.width,
                "height": window.height,
            },
            warnings=warnings,
        )
