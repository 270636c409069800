"""Command: clone the test scene and compare the drawings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scenectl.commands._base import SceneCommand, style_option

if TYPE_CHECKING:
    from scenectl.commands._context import AppContext


@click.command(
    cls=SceneCommand,
    examples="""\
  scenectl clone
  scenectl --json clone --style bw""",
)
@style_option
@click.pass_obj
def clone(app: AppContext, style: str | None) -> None:
    """Deep-clone the test scene and draw original and clone."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).clone_scene(style))
