"""Command: chain-of-responsibility widget demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scenectl.commands._base import SceneCommand

if TYPE_CHECKING:
    from scenectl.commands._context import AppContext


@click.command(
    cls=SceneCommand,
    examples="""\
  scenectl widgets
  scenectl -v widgets""",
)
@click.pass_obj
def widgets(app: AppContext) -> None:
    """Draw the demo window and press its Print button."""
    from scenectl.services.widgets import WidgetService

    app.emit(WidgetService(app.settings, app.plugins).run_demo())
