"""Console widget tree with chain-of-responsibility press handling."""

from scenectl.widgets.controls import Button, CompositeControl, Label, MainWindow, UIComponent
from scenectl.widgets.events import EventRequest, Handler, PressListener

__all__ = [
    "Button",
    "CompositeControl",
    "EventRequest",
    "Handler",
    "Label",
    "MainWindow",
    "PressListener",
    "UIComponent",
]
