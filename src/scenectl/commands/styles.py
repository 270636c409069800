"""Command: list scene styles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scenectl.commands._base import SceneCommand

if TYPE_CHECKING:
    from scenectl.commands._context import AppContext


@click.command(cls=SceneCommand, examples="  scenectl styles\n  scenectl --json styles")
@click.pass_obj
def styles(app: AppContext) -> None:
    """List built-in and plugin scene styles (* marks the default)."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).list_styles())
