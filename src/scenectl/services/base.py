"""BaseService: common foundation for scenectl services.

Every service receives the frozen :class:`SceneSettings` and, optionally,
a loaded :class:`PluginManager`. Services render into a StringIO-backed
rich Console and hand the captured lines back in a ServiceResult.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console

from scenectl.domain.builders import Palette
from scenectl.domain.factory import SceneFactory, get_factory

if TYPE_CHECKING:
    from scenectl.config.settings import SceneSettings
    from scenectl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class SceneService(BaseService):
            def draw_test(self, style: str | None = None) -> ServiceResult:
                factory = self._factory(style)
                ...
    """

    def __init__(self, settings: SceneSettings, plugins: PluginManager | None = None) -> None:
        self._settings = settings
        self._plugins = plugins

    def _resolve_style(self, style: str | None) -> str:
        return style or self._settings.scene.default_style

    def _plugin_styles(self) -> dict[str, type[SceneFactory]]:
        if self._plugins is None:
            return {}
        return self._plugins.collect_styles()

    def _factory(self, style: str | None) -> SceneFactory:
        """Return the factory for *style*.

        Raises:
            KeyError: If the style is unknown to the core and all plugins.
        """
        return get_factory(self._resolve_style(style), extra=self._plugin_styles())

    def _palette(self) -> Palette:
        cfg = self._settings.palette
        return Palette(point=cfg.point, line=cfg.line, circle=cfg.circle, triangle=cfg.triangle)

    def _console(self) -> Console:
        return Console(
            file=StringIO(),
            no_color=True,
            highlight=False,
            width=self._settings.output.width,
        )

    @staticmethod
    def _captured_lines(console: Console) -> list[str]:
        assert isinstance(console.file, StringIO)
        return console.file.getvalue().splitlines()

    def _dispatch_render(self, op: str, style: str, line_count: int, warnings: list[str]) -> None:
        """Fire the ``post_render`` hook. No-op without plugins.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            self._plugins.hook.post_render(op=op, style=style, line_count=line_count)
        except Exception:
            logger.debug("post_render hook failed for %s", op, exc_info=True)
            warnings.append(f"post_render hook failed for {op}")
