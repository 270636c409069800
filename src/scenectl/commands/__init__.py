"""Subcommand modules for scenectl.

Provides register_commands() which uses deferred imports to keep
``scenectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from scenectl.commands.draw import draw
    from scenectl.commands.export import export

    cli.add_command(draw)
    cli.add_command(export)

    # --- Standalone commands ---
    from scenectl.commands.clone import clone
    from scenectl.commands.memory import memory
    from scenectl.commands.styles import styles
    from scenectl.commands.widgets import widgets

    cli.add_command(clone)
    cli.add_command(memory)
    cli.add_command(widgets)
    cli.add_command(styles)
