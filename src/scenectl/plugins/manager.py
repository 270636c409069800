"""Plugin discovery, scene-style collection, and hook dispatch.

Discovery: entry_points (pip-installed) in the ``scenectl.plugins`` group,
plus direct registration of plugin instances.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from scenectl.plugins.hookspecs import ScenectlHookSpec

if TYPE_CHECKING:
    from scenectl.domain.factory import SceneFactory

PROJECT_NAME = "scenectl"
ENTRY_POINT_GROUP = "scenectl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, style registration, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ScenectlHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names of all registered plugins."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_styles(self) -> dict[str, type[SceneFactory]]:
        """Merge the scene styles contributed by every plugin.

        Each plugin's hook runs on its own: a hook that raises, a
        malformed contribution, or an abstract factory class is logged
        and skipped. Built-in style names cannot be overridden.
        """
        from scenectl.domain.factory import SCENE_STYLES, SceneFactory

        styles: dict[str, type[SceneFactory]] = {}
        # pluggy calls hooks last-registered first; keep that order.
        for impl in reversed(self._pm.hook.register_scene_styles.get_hookimpls()):
            try:
                contribution = impl.function()
            except Exception:
                logger.warning(
                    "Scene style hook failed in plugin %s",
                    impl.plugin_name,
                    exc_info=True,
                )
                continue
            if contribution is None:
                continue
            if not isinstance(contribution, dict):
                logger.warning("Ignoring non-dict scene style registration: %r", contribution)
                continue
            for name, factory_cls in contribution.items():
                if name in SCENE_STYLES:
                    logger.warning("Plugin style %r conflicts with a built-in style", name)
                    continue
                if not (inspect.isclass(factory_cls) and issubclass(factory_cls, SceneFactory)):
                    logger.warning("Plugin style %r is not a SceneFactory subclass", name)
                    continue
                if inspect.isabstract(factory_cls):
                    logger.warning("Plugin style %r is an abstract factory", name)
                    continue
                styles[name] = factory_cls
        return styles

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
