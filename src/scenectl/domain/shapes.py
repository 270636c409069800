"""Geometry primitives and the Drawable contract.

Every drawable supports three operations:

- ``draw``: writes a human-readable line describing its geometry.
- ``clone``: returns an independent deep copy (no shared mutable state).
- ``accept``: double dispatch into a :class:`~scenectl.domain.visitor.ShapeVisitor`.

``Triangle`` deliberately does not implement the contract; it is brought
into the hierarchy by :class:`TriangleAdapter`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from scenectl.domain.scene import Scene
    from scenectl.domain.visitor import ShapeVisitor


def format_number(value: float) -> str:
    """Format a coordinate the way the scene output expects.

    Integral values drop the fractional part; everything else uses the
    shortest round-trip representation.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(2.5)
        '2.5'
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def emit(console: Console | None, text: str) -> None:
    """Write one plain line to *console* (stdout when None)."""
    target = console if console is not None else Console(highlight=False)
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


class Drawable(ABC):
    """Abstract base for everything that can be placed in a scene."""

    @abstractmethod
    def draw(self, console: Console | None = None) -> None:
        """Write the textual description of this object."""
        ...

    @abstractmethod
    def clone(self) -> Drawable:
        """Return a deep, independent copy."""
        ...

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> None:
        """Dispatch to the visit method matching this object's kind."""
        ...

    def walk(self) -> Iterator[Drawable]:
        """Yield this object and every drawable it owns, depth first."""
        yield self

    def add_to_scene(self, scene: Scene) -> None:
        scene.add_object(self)


@dataclass(frozen=True)
class Point(Drawable):
    x: float
    y: float

    def draw(self, console: Console | None = None) -> None:
        emit(console, f"Рисуем точку в координатах ({self.label()})")

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_point(self)

    def label(self) -> str:
        """Return ``x, y`` formatted for output."""
        return f"{format_number(self.x)}, {format_number(self.y)}"


@dataclass(frozen=True)
class Line(Drawable):
    start: Point
    end: Point

    def draw(self, console: Console | None = None) -> None:
        emit(console, f"Рисуем линию от ({self.start.label()}) до ({self.end.label()})")

    def clone(self) -> Line:
        return Line(self.start.clone(), self.end.clone())

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_line(self)


@dataclass(frozen=True)
class Circle(Drawable):
    center: Point
    radius: float

    def draw(self, console: Console | None = None) -> None:
        emit(
            console,
            f"Рисуем круг с центром в ({self.center.label()}) "
            f"и радиусом {format_number(self.radius)}",
        )

    def clone(self) -> Circle:
        return Circle(self.center.clone(), self.radius)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_circle(self)


@dataclass(frozen=True)
class Triangle:
    """Three-vertex shape with its own rendering API (not a Drawable)."""

    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    def render(self, console: Console | None = None) -> None:
        vertices = ", ".join(f"({p.label()})" for p in self.vertices())
        emit(console, f"Рисуем треугольник с вершинами {vertices}")

    def vertices(self) -> tuple[Point, Point, Point]:
        return (
            Point(self.x1, self.y1),
            Point(self.x2, self.y2),
            Point(self.x3, self.y3),
        )

    def coordinates(self) -> tuple[float, float, float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2, self.x3, self.y3)


class TriangleAdapter(Drawable):
    """Adapts :class:`Triangle` to the Drawable contract."""

    __slots__ = ("_triangle",)

    def __init__(self, triangle: Triangle) -> None:
        if not isinstance(triangle, Triangle):
            msg = f"TriangleAdapter requires a Triangle, got {type(triangle).__name__}"
            raise TypeError(msg)
        self._triangle = triangle

    @property
    def triangle(self) -> Triangle:
        return self._triangle

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return self._triangle.vertices()

    def draw(self, console: Console | None = None) -> None:
        self._triangle.render(console)

    def clone(self) -> TriangleAdapter:
        return TriangleAdapter(Triangle(*self._triangle.coordinates()))

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_triangle(self)

    def __repr__(self) -> str:
        return f"TriangleAdapter({self._triangle!r})"
