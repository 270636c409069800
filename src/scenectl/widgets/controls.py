"""Console widgets laid out as nested bordered boxes.

Each component renders row by row: ``draw_line(n)`` returns the text of
row *n* or None when the component has nothing on that row. Composites
size themselves from their children (height = tallest child + 2,
width = sum of child widths + 2) and pad silent children with blanks.

Press handling is a chain of responsibility: a component runs its own
listeners in registration order, stops as soon as one consumes the
request, and otherwise forwards the request to its parent.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator

from scenectl.widgets.events import EventRequest, Handler, PressListener

logger = logging.getLogger(__name__)


class UIComponent(ABC):
    def __init__(self) -> None:
        self._next_handler: Handler | None = None
        self._listeners: list[PressListener] = []

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    @abstractmethod
    def draw_line(self, line: int) -> str | None:
        """Return row *line* of this component, or None past its extent."""
        ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @property
    @abstractmethod
    def width(self) -> int: ...

    def walk(self) -> Iterator[UIComponent]:
        """Yield this component and everything nested in it, depth first."""
        yield self

    # ------------------------------------------------------------------
    # Chain of responsibility
    # ------------------------------------------------------------------

    @property
    def next_handler(self) -> Handler | None:
        return self._next_handler

    def set_next_handler(self, next_handler: Handler | None) -> None:
        self._next_handler = next_handler

    def add_press_listener(self, listener: PressListener) -> None:
        self._listeners.append(listener)

    def remove_press_listener(self, listener: PressListener) -> bool:
        """Remove the first registration of *listener*; False if absent."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def handle(self, request: EventRequest) -> None:
        for listener in list(self._listeners):
            if request.handled:
                return
            listener(self, request)
        if request.handled:
            return
        if self._next_handler is not None:
            logger.debug("Forwarding press from %s", type(self).__name__)
            self._next_handler.handle(request)


class Label(UIComponent):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def draw_line(self, line: int) -> str | None:
        if line == 0:
            return f" {self.text} "
        return None

    @property
    def height(self) -> int:
        return 1

    @property
    def width(self) -> int:
        return len(self.text) + 2


class Button(UIComponent):
    FRAME = "*"

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def draw_line(self, line: int) -> str | None:
        if line in (0, 2):
            return self.FRAME * self.width
        if line == 1:
            return f"{self.FRAME}{self.text}{self.FRAME}"
        return None

    @property
    def height(self) -> int:
        return 3

    @property
    def width(self) -> int:
        return len(self.text) + 2

    def press(self) -> EventRequest:
        """Send a fresh press request up the chain and return it."""
        logger.debug("Button pressed: %s", self.text)
        request = EventRequest()
        self.handle(request)
        return request


class CompositeControl(UIComponent):
    FRAME = "+"

    def __init__(self) -> None:
        super().__init__()
        self._children: list[UIComponent] = []

    @property
    def children(self) -> tuple[UIComponent, ...]:
        return tuple(self._children)

    def add(self, component: UIComponent) -> CompositeControl:
        """Append *component* and make this control its next handler.

        A component already placed in another control is moved: it is
        removed from its old parent first.

        Raises:
            ValueError: If *component* is this control or contains it.
        """
        if any(node is self for node in component.walk()):
            msg = "A control cannot contain itself"
            raise ValueError(msg)
        previous = component.next_handler
        if isinstance(previous, CompositeControl):
            previous.remove(component)
        self._children.append(component)
        component.set_next_handler(self)
        return self

    def remove(self, component: UIComponent) -> bool:
        """Detach *component*; False when it is not a direct child."""
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                component.set_next_handler(None)
                return True
        return False

    def walk(self) -> Iterator[UIComponent]:
        yield self
        for child in self._children:
            yield from child.walk()

    @property
    def height(self) -> int:
        return max((child.height for child in self._children), default=0) + 2

    @property
    def width(self) -> int:
        return sum(child.width for child in self._children) + 2

    def draw_line(self, line: int) -> str | None:
        last = self.height - 1
        if line in (0, last):
            return self.FRAME * self.width
        if 0 < line < last:
            cells = [
                row if (row := child.draw_line(line - 1)) is not None else " " * child.width
                for child in self._children
            ]
            return f"{self.FRAME}{''.join(cells)}{self.FRAME}"
        return None

    def render(self) -> list[str]:
        rows: list[str] = []
        for line in range(self.height):
            row = self.draw_line(line)
            if row is not None:
                rows.append(row)
        return rows


class MainWindow(CompositeControl):
    """Top-level control: the end of every press chain.

    The window is drawn double-spaced, each row followed by a blank row.
    """

    def render(self) -> list[str]:
        rows: list[str] = []
        for row in super().render():
            rows.extend((row, ""))
        return rows
