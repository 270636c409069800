"""Press events and the handler contract for the widget chain."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from scenectl.widgets.controls import UIComponent


class EventRequest:
    """A press travelling up the widget chain until a listener consumes it."""

    __slots__ = ("_handled",)

    def __init__(self) -> None:
        self._handled = False

    @property
    def handled(self) -> bool:
        return self._handled

    def set_handled(self, value: bool) -> None:
        self._handled = value

    def consume(self) -> None:
        self._handled = True

    def __repr__(self) -> str:
        return f"EventRequest(handled={self._handled})"


class Handler(Protocol):
    def set_next_handler(self, next_handler: Handler | None) -> None: ...

    def handle(self, request: EventRequest) -> None: ...


type PressListener = Callable[[UIComponent, EventRequest], None]
