"""SceneService: build, draw, clone, export and measure demo scenes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from scenectl.domain.builders import DecoratedSceneBuilder, TestSceneBuilder, build_primitive_scene
from scenectl.domain.factory import SCENE_STYLES
from scenectl.domain.visitor import XmlExportVisitor
from scenectl.infrastructure.memory import measure_allocations
from scenectl.services.base import BaseService
from scenectl.services.result import ServiceResult
from scenectl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from rich.console import Console

    from scenectl.domain.factory import SceneFactory

logger = logging.getLogger(__name__)

# Shape data for the basic factory demo: (origin, line end, radius).
# The first requested style gets the first entry, every later style the second.
_BASIC_SHAPES: tuple[tuple[tuple[float, float], tuple[float, float], float], ...] = (
    ((2, 3), (5, 7), 4),
    ((1, 1), (3, 4), 2),
)


class SceneService(BaseService):
    """Scene operations for the CLI. Every method returns a ServiceResult."""

    def _run(
        self,
        op: str,
        style: str | None,
        render: Callable[[SceneFactory, Console], dict[str, Any]],
    ) -> ServiceResult:
        """Resolve the factory, render into a captured console, wrap the result."""
        resolved = self._resolve_style(style)
        try:
            factory = self._factory(resolved)
        except KeyError as exc:
            return ServiceResult.failure(op, "UNKNOWN_STYLE", str(exc.args[0]), style=resolved)

        console = self._console()
        try:
            with trace_span("render"):
                extra = render(factory, console)
        except (TypeError, ValueError) as exc:
            logger.debug("Render failed for %s", op, exc_info=True)
            return ServiceResult.failure(op, "INVALID_SCENE", str(exc), style=resolved)

        lines = self._captured_lines(console)
        warnings: list[str] = []
        self._dispatch_render(op, resolved, len(lines), warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={"style": resolved, "label": factory.label, "lines": lines, **extra},
            warnings=warnings,
        )

    @traced
    def draw_basic(self, styles: Sequence[str] | None = None) -> ServiceResult:
        """Draw a point, line and circle scene for each style in turn."""
        requested = list(styles) if styles else list(SCENE_STYLES)
        plugin_styles = self._plugin_styles()
        unknown = [s for s in requested if s not in SCENE_STYLES and s not in plugin_styles]
        if unknown:
            known = ", ".join(sorted({*SCENE_STYLES, *plugin_styles}))
            return ServiceResult.failure(
                "draw_basic",
                "UNKNOWN_STYLE",
                f"Unknown scene style {unknown[0]!r} (known: {known})",
                style=unknown[0],
            )

        lines: list[str] = []
        warnings: list[str] = []
        for index, style in enumerate(requested):
            factory = self._factory(style)
            origin, end, radius = _BASIC_SHAPES[min(index, len(_BASIC_SHAPES) - 1)]
            console = self._console()
            build_primitive_scene(factory, origin, end, radius).draw(console)
            scene_lines = self._captured_lines(console)
            self._dispatch_render("draw_basic", style, len(scene_lines), warnings)
            lines.extend(scene_lines)

        return ServiceResult(
            ok=True,
            op="draw_basic",
            data={"styles": requested, "lines": lines},
            warnings=warnings,
        )

    @traced
    def draw_test(self, style: str | None = None) -> ServiceResult:
        """Draw the reference test scene (a composite of point, line, circle)."""

        def render(factory: SceneFactory, console: Console) -> dict[str, Any]:
            scene = TestSceneBuilder(factory).build_test_scene()
            scene.draw(console)
            return {"object_count": len(scene)}

        return self._run("draw_test", style, render)

    @traced
    def draw_decorated(self, style: str | None = None) -> ServiceResult:
        """Draw the color-decorated composite."""

        def render(factory: SceneFactory, console: Console) -> dict[str, Any]:
            composite = DecoratedSceneBuilder(factory, self._palette()).build_decorated_composite()
            composite.draw(console)
            return {"object_count": len(composite)}

        return self._run("draw_decorated", style, render)

    @traced
    def draw_facade(self, style: str | None = None) -> ServiceResult:
        """Draw the colored scene assembled through SceneFacade."""

        def render(factory: SceneFactory, console: Console) -> dict[str, Any]:
            scene = DecoratedSceneBuilder(factory, self._palette()).build_facade_scene()
            scene.draw(console)
            return {"object_count": len(scene)}

        return self._run("draw_facade", style, render)

    @traced
    def clone_scene(self, style: str | None = None) -> ServiceResult:
        """Draw the test scene and a deep clone of it; report whether they match."""

        def render(factory: SceneFactory, console: Console) -> dict[str, Any]:
            original = TestSceneBuilder(factory).build_test_scene()
            copy = factory.create_scene()
            for obj in original:
                obj.clone().add_to_scene(copy)

            original.draw(console)
            original_lines = self._captured_lines(console)
            clone_console = self._console()
            copy.draw(clone_console)
            clone_lines = self._captured_lines(clone_console)

            # Deep copy: no node of the original may appear in the clone.
            shared = sum(
                1
                for a, b in zip(original, copy, strict=True)
                for node in a.walk()
                if any(node is other for other in b.walk())
            )
            return {
                "clone_lines": clone_lines,
                "identical": original_lines == clone_lines,
                "shared_objects": shared,
            }

        return self._run("clone_scene", style, render)

    @traced
    def export_xml(self, style: str | None = None) -> ServiceResult:
        """Export the test scene's leaves as XML tags via XmlExportVisitor."""

        def render(factory: SceneFactory, console: Console) -> dict[str, Any]:
            scene = TestSceneBuilder(factory).build_test_scene()
            tags = XmlExportVisitor(console).export(scene)
            return {"tag_count": len(tags), "content": "\n".join(tags) + "\n"}

        return self._run("export_xml", style, render)

    @traced
    def measure_memory(self, style: str | None = None) -> ServiceResult:
        """Measure heap allocations made while building the test scene.

        The figures are illustrative only.
        """

        def render(factory: SceneFactory, console: Console) -> dict[str, Any]:
            builder = TestSceneBuilder(factory)
            with measure_allocations("test scene") as usage:
                scene = builder.build_test_scene()
            nodes = sum(1 for obj in scene for _ in obj.walk())
            return {**usage.to_dict(), "object_count": len(scene), "node_count": nodes}

        return self._run("measure_memory", style, render)

    @traced
    def list_styles(self) -> ServiceResult:
        """List built-in and plugin-provided scene styles."""
        items: list[dict[str, str]] = []
        for name, factory_cls in SCENE_STYLES.items():
            items.append({"style": name, "label": factory_cls().label, "source": "builtin"})
        for name, factory_cls in sorted(self._plugin_styles().items()):
            items.append({"style": name, "label": factory_cls().label, "source": "plugin"})
        return ServiceResult(
            ok=True,
            op="list_styles",
            data={"items": items, "default": self._settings.scene.default_style},
        )
