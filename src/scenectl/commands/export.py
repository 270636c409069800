"""Command group: export scenes through visitors."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scenectl.commands._base import SceneGroup, style_option

if TYPE_CHECKING:
    from scenectl.commands._context import AppContext


@click.group(
    cls=SceneGroup,
    examples="""\
  scenectl export xml
  scenectl export xml --output scene.xml""",
)
def export() -> None:
    """Export scene contents in other formats."""


@export.command(
    examples="""\
  scenectl export xml
  scenectl export xml --style bw --output scene.xml"""
)
@style_option
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def xml(app: AppContext, style: str | None, output_file: str | None) -> None:
    """Export the test scene's shapes as XML tags."""
    from scenectl.services.result import ServiceResult
    from scenectl.services.scene import SceneService

    result = SceneService(app.settings, app.plugins).export_xml(style)
    if not result.ok or not output_file:
        app.emit(result)
        return

    Path(output_file).write_text(result.data["content"], encoding="utf-8")
    app.emit(
        ServiceResult(
            ok=True,
            op="export_xml_file",
            data={
                "style": result.data["style"],
                "output_file": output_file,
                "tag_count": result.data["tag_count"],
            },
            warnings=result.warnings,
            meta=result.meta,
        )
    )
