"""Structural wrappers: Composite and Decorator drawables.

INVARIANT: Ownership is a tree. A composite never contains itself,
directly or through nested composites and decorators.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from scenectl.domain.shapes import Drawable, emit

if TYPE_CHECKING:
    from rich.console import Console

    from scenectl.domain.visitor import ShapeVisitor

COMPOSITE_HEADER = "Рисуем композитный элемент:"


def _require_drawable(obj: object, role: str) -> Drawable:
    if not isinstance(obj, Drawable):
        msg = f"{role} must be a Drawable, got {type(obj).__name__}"
        raise TypeError(msg)
    return obj


class CompositeDrawable(Drawable):
    """Ordered group of drawables drawn and cloned as one.

    Insertion order is draw order. ``remove`` matches by identity, so two
    equal points are still distinct members.
    """

    def __init__(self, children: Iterable[Drawable] = ()) -> None:
        self._children: list[Drawable] = []
        for child in children:
            self.add(child)

    @property
    def children(self) -> tuple[Drawable, ...]:
        return tuple(self._children)

    def add(self, child: Drawable) -> None:
        """Append *child*.

        Raises:
            TypeError: If *child* is not a Drawable.
            ValueError: If adding *child* would make the composite contain itself.
        """
        _require_drawable(child, "Composite child")
        if any(node is self for node in child.walk()):
            msg = "A composite cannot contain itself"
            raise ValueError(msg)
        self._children.append(child)

    def remove(self, child: Drawable) -> bool:
        """Remove *child*; return False when it is not a member."""
        for index, member in enumerate(self._children):
            if member is child:
                del self._children[index]
                return True
        return False

    def draw(self, console: Console | None = None) -> None:
        emit(console, COMPOSITE_HEADER)
        for child in self._children:
            child.draw(console)

    def clone(self) -> CompositeDrawable:
        return CompositeDrawable(child.clone() for child in self._children)

    def accept(self, visitor: ShapeVisitor) -> None:
        # Flattened: visitors see the leaves, not the group.
        for child in self._children:
            child.accept(visitor)

    def walk(self) -> Iterator[Drawable]:
        yield self
        for child in self._children:
            yield from child.walk()

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"CompositeDrawable({self._children!r})"


class Decorator(Drawable):
    """Wraps exactly one drawable, fixed at construction.

    Subclasses add behaviour around the delegated ``draw`` and say how to
    rebuild themselves around a cloned inner object via :meth:`rewrap`.
    """

    def __init__(self, wrapped: Drawable) -> None:
        self._wrapped = _require_drawable(wrapped, "Decorated object")

    @property
    def wrapped(self) -> Drawable:
        return self._wrapped

    def draw(self, console: Console | None = None) -> None:
        self._wrapped.draw(console)

    def clone(self) -> Decorator:
        return self.rewrap(self._wrapped.clone())

    @abstractmethod
    def rewrap(self, inner: Drawable) -> Decorator:
        """Return a decorator of the same kind around *inner*."""
        ...

    def accept(self, visitor: ShapeVisitor) -> None:
        self._wrapped.accept(visitor)

    def walk(self) -> Iterator[Drawable]:
        yield self
        yield from self._wrapped.walk()


class ColorDecorator(Decorator):
    """Annotates the wrapped drawable with a fill color."""

    def __init__(self, wrapped: Drawable, fill_color: str) -> None:
        super().__init__(wrapped)
        self._fill_color = fill_color

    @property
    def fill_color(self) -> str:
        return self._fill_color

    def draw(self, console: Console | None = None) -> None:
        self._wrapped.draw(console)
        emit(console, f"Закрашиваем объект цветом: {self._fill_color}")

    def rewrap(self, inner: Drawable) -> ColorDecorator:
        return ColorDecorator(inner, self._fill_color)

    def __repr__(self) -> str:
        return f"ColorDecorator({self._wrapped!r}, {self._fill_color!r})"
