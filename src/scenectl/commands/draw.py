"""Command group: draw demo scenes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scenectl.commands._base import SceneGroup, style_option

if TYPE_CHECKING:
    from scenectl.commands._context import AppContext

_DRAW_EXAMPLES = """\
  scenectl draw basic
  scenectl draw basic --style bw
  scenectl draw test --style color
  scenectl draw decorated
  scenectl --json draw facade"""


@click.group(cls=SceneGroup, examples=_DRAW_EXAMPLES)
def draw() -> None:
    """Draw demo scenes to the console."""


@draw.command(
    examples="""\
  scenectl draw basic
  scenectl draw basic -s bw -s color"""
)
@click.option(
    "-s",
    "--style",
    "styles",
    multiple=True,
    help="Scene style to draw (repeatable; default: every built-in style).",
)
@click.pass_obj
def basic(app: AppContext, styles: tuple[str, ...]) -> None:
    """Draw a point, a line and a circle with each scene factory."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).draw_basic(list(styles)))


@draw.command(
    examples="""\
  scenectl draw test
  scenectl draw test --style bw"""
)
@style_option
@click.pass_obj
def test(app: AppContext, style: str | None) -> None:
    """Draw the builder's test scene (a composite of three shapes)."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).draw_test(style))


@draw.command(
    examples="""\
  scenectl draw decorated
  SCENECTL_PALETTE__POINT=Red scenectl draw decorated"""
)
@style_option
@click.pass_obj
def decorated(app: AppContext, style: str | None) -> None:
    """Draw color-decorated shapes grouped in a composite."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).draw_decorated(style))


@draw.command(
    examples="""\
  scenectl draw facade
  scenectl draw facade --style bw"""
)
@style_option
@click.pass_obj
def facade(app: AppContext, style: str | None) -> None:
    """Draw a colored scene assembled through the scene facade."""
    from scenectl.services.scene import SceneService

    app.emit(SceneService(app.settings, app.plugins).draw_facade(style))
