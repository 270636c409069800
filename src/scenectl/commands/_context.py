"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from scenectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from scenectl.config.settings import SceneSettings
    from scenectl.plugins.manager import PluginManager
    from scenectl.services.result import ServiceResult

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered lazily on first use so ``--help`` and
    ``--version`` never import third-party plugin code.
    """

    def __init__(self, settings: SceneSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from scenectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from scenectl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (entry points loaded on first access)."""
        if self._plugins is None:
            from scenectl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            names = self._plugins.discover_and_load()
            log.debug("plugins.loaded", plugins=names)
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            log.debug("command.failed", op=result.op, code=result.error and result.error.code)
            click.echo(output, err=True)
            raise SystemExit(1)
