"""Scene: ordered, labeled collection of drawables rendered together."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from scenectl.domain.shapes import Drawable, emit

if TYPE_CHECKING:
    from rich.console import Console


class Scene:
    """Append-only list of drawables with an immutable style label.

    Scenes are owned by whoever builds them (a factory caller, a builder,
    or a :class:`~scenectl.domain.facade.SceneFacade`); there is no shared
    process-wide instance.
    """

    def __init__(self, style_label: str) -> None:
        self._style_label = style_label
        self._objects: list[Drawable] = []

    @property
    def style_label(self) -> str:
        return self._style_label

    @property
    def objects(self) -> tuple[Drawable, ...]:
        return tuple(self._objects)

    def add_object(self, drawable: Drawable) -> None:
        if not isinstance(drawable, Drawable):
            msg = f"Scene objects must be Drawable, got {type(drawable).__name__}"
            raise TypeError(msg)
        self._objects.append(drawable)

    def header(self) -> str:
        return f"Рисуем {self._style_label} сцену:"

    def draw(self, console: Console | None = None) -> None:
        emit(console, self.header())
        for obj in self._objects:
            obj.draw(console)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self._objects)

    def __repr__(self) -> str:
        return f"Scene({self._style_label!r}, objects={len(self._objects)})"
