"""Command: report heap allocations for building the test scene."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scenectl.commands._base import SceneCommand, style_option

if TYPE_CHECKING:
    from scenectl.commands._context import AppContext


@click.command(
    cls=SceneCommand,
    examples="""\
  scenectl memory
  scenectl --json memory --style bw""",
)
@style_option
@click.pass_obj
def memory(app: AppContext, style: str | None) -> None:
    """Measure memory allocated while building the test scene (illustrative)."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).measure_memory(style))
