import dataclasses
import logging
import os
import pathlib
import sys
from typing import Any, Callable, List, Optional, Tuple

from .cad_types import Vector2, VectorLike, as_vector
from .constants import MSG_SELECT_POINT, MSG_UNREADABLE_POINT, SETTINGS_FILE_NAME
from .exceptions import InputMissingError
from .parameters import ThickLineInputs
from .settings import PathLike, ThickLineSettings, load_settings, save_settings
from .thick_line import ThickLineResult, build_thick_line

logger = logging.getLogger(__name__)

PointResolver = Callable[[Any], Optional[VectorLike]]
PlaneProjection = Callable[[VectorLike], VectorLike]


def default_settings_path() -> pathlib.Path:
    """Per-user settings file location used by the Fusion add-in."""
    if sys.platform == "win32":
        base = pathlib.Path(os.environ.get("APPDATA", ""))
        app_dir = base / "Autodesk" / "Fusion" / "API" / "ThickLine"
    else:
        base = pathlib.Path(os.environ.get("HOME", ""))
        app_dir = (
            base / "Library" / "Application Support" / "Autodesk" / "Fusion" / "API" / "ThickLine"
        )
    return app_dir / SETTINGS_FILE_NAME


class ThickLineApp:
    """Host-side driver for the thick line command.

    The host supplies ``point_resolver`` to turn a selected entity (sketch
    point, construction point, vertex...) into a world point, or None for
    unsupported entities, and optionally ``to_plane`` to project world points
    into sketch space. Without a projection the x/y of the world point are
    used directly.
    """

    def __init__(
        self,
        point_resolver: PointResolver,
        to_plane: Optional[PlaneProjection] = None,
        settings_path: Optional[PathLike] = None,
    ):
        self.point_resolver = point_resolver
        self.to_plane = to_plane
        self.settings_path = settings_path
        self.settings = load_settings(settings_path)
        self._results: List[ThickLineResult] = []

    def register_result(self, result: ThickLineResult) -> None:
        """Register a successfully built thick line with this app for tracking."""
        if not any(existing is result for existing in self._results):
            self._results.append(result)

    def get_results(self) -> List[ThickLineResult]:
        """Get all thick lines built by this app."""
        return self._results.copy()

    def result_count(self) -> int:
        return len(self._results)

    def _plane_point(self, entity: Any, end: str) -> Vector2:
        world = self.point_resolver(entity)
        if world is None:
            raise InputMissingError(MSG_UNREADABLE_POINT.format(end=end), context=entity)
        if self.to_plane is not None:
            return as_vector(self.to_plane(world))
        return as_vector(world)

    def resolve_points(self, entity_a: Any, entity_b: Any) -> Tuple[Vector2, Vector2]:
        """Convert both selections to sketch points.

        Raises:
            InputMissingError: If a selection is absent or cannot be read
        """
        # Both selections are checked for presence before either is read
        if entity_a is None:
            raise InputMissingError(MSG_SELECT_POINT.format(end="A"))
        if entity_b is None:
            raise InputMissingError(MSG_SELECT_POINT.format(end="B"))
        return self._plane_point(entity_a, "A"), self._plane_point(entity_b, "B")

    def make_inputs(self, a: VectorLike, b: VectorLike, **overrides) -> ThickLineInputs:
        """Inputs from the current settings, with per-call field overrides."""
        inputs = self.settings.apply(a, b)
        if overrides:
            inputs = dataclasses.replace(inputs, **overrides)
        return inputs

    def _inputs_for(self, entity_a: Any, entity_b: Any, overrides: dict) -> ThickLineInputs:
        a, b = self.resolve_points(entity_a, entity_b)
        return self.make_inputs(a, b, **overrides)

    def preview(self, entity_a: Any, entity_b: Any, **overrides) -> ThickLineResult:
        """Validate and generate without persisting anything."""
        try:
            inputs = self._inputs_for(entity_a, entity_b, overrides)
        except (TypeError, ValueError) as exc:
            return ThickLineResult(error=str(exc))
        return build_thick_line(inputs)

    def execute(self, entity_a: Any, entity_b: Any, **overrides) -> ThickLineResult:
        """Build the thick line and remember the settings that produced it.

        A failed settings write is logged and otherwise ignored; the generated
        polygons are returned either way.
        """
        # Missing selections and unusable overrides both end up here
        try:
            inputs = self._inputs_for(entity_a, entity_b, overrides)
        except (TypeError, ValueError) as exc:
            logger.info(f"[ThickLine] Command failed: {exc}")
            return ThickLineResult(error=str(exc))

        result = build_thick_line(inputs)
        if not result.ok:
            logger.info(f"[ThickLine] Command failed: {result.error}")
            return result

        self.register_result(result)
        self.settings = ThickLineSettings.from_inputs(inputs)
        if self.settings_path is not None:
            save_settings(self.settings, self.settings_path)
        return result
