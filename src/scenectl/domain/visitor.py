"""Visitor: external operations dispatched per shape kind.

Composites and decorators forward ``accept`` to their contents, so a
visitor receives a flattened stream of leaves. ``visit_composite`` is
only reached when a caller invokes it directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

from scenectl.domain.shapes import emit, format_number

if TYPE_CHECKING:
    from rich.console import Console

    from scenectl.domain.shapes import Circle, Drawable, Line, Point, TriangleAdapter
    from scenectl.domain.structure import CompositeDrawable


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_point(self, point: Point) -> None: ...

    @abstractmethod
    def visit_line(self, line: Line) -> None: ...

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None: ...

    @abstractmethod
    def visit_triangle(self, adapter: TriangleAdapter) -> None: ...

    def visit_composite(self, composite: CompositeDrawable) -> None:
        for child in composite.children:
            child.accept(self)


def _tag(name: str, **attrs: float) -> str:
    rendered = " ".join(f'{key}="{format_number(value)}"' for key, value in attrs.items())
    return f"<{name} {rendered} />"


class XmlExportVisitor(ShapeVisitor):
    """Export visited leaves as self-closing XML tags, one per line.

    Lines accumulate in :attr:`lines` in visit order. When a console is
    given, each line is also written to it as it is produced.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console
        self.lines: list[str] = []

    def _write(self, line: str) -> None:
        self.lines.append(line)
        if self._console is not None:
            emit(self._console, line)

    def visit_point(self, point: Point) -> None:
        self._write(_tag("Point", x=point.x, y=point.y))

    def visit_line(self, line: Line) -> None:
        self._write(
            _tag(
                "Line",
                startX=line.start.x,
                startY=line.start.y,
                endX=line.end.x,
                endY=line.end.y,
            )
        )

    def visit_circle(self, circle: Circle) -> None:
        self._write(_tag("Circle", cx=circle.center.x, cy=circle.center.y, radius=circle.radius))

    def visit_triangle(self, adapter: TriangleAdapter) -> None:
        p1, p2, p3 = adapter.vertices
        self._write(_tag("Triangle", x1=p1.x, y1=p1.y, x2=p2.x, y2=p2.y, x3=p3.x, y3=p3.y))

    def export(self, drawables: Iterable[Drawable]) -> list[str]:
        """Visit every drawable in order and return the collected lines."""
        for drawable in drawables:
            drawable.accept(self)
        return list(self.lines)
