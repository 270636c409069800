"""Pluggy hook specifications for scenectl.

One setup-time hook lets plugins contribute scene styles; one render
hook observes every drawing operation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from scenectl.domain.factory import SceneFactory

hookspec = pluggy.HookspecMarker("scenectl")
hookimpl = pluggy.HookimplMarker("scenectl")


class ScenectlHookSpec:
    """Hook specifications for the scenectl plugin system."""

    @hookspec
    def register_scene_styles(self) -> dict[str, type[SceneFactory]] | None:
        """Return extra scene factories keyed by style name.

        Built-in style names are reserved; plugin entries using them are
        ignored.
        """

    @hookspec
    def post_render(self, op: str, style: str, line_count: int) -> None:
        """Called after a drawing operation produced *line_count* lines."""
