"""
Thick line pipeline - derive, validate and generate in one call.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import ThickLineError
from .parameters import ThickLineInputs, ThickLineParameters, derive_parameters
from .primitives import Polygon
from .shape_generator import generate_shapes
from .validation import ValidationResult, validate_parameters

logger = logging.getLogger(__name__)


@dataclass
class ThickLineResult:
    """Outcome of one pipeline run.

    On success ``polygons`` holds the generated shapes and ``error`` is None.
    On failure ``polygons`` is empty and ``error`` is the single reason to
    show the user. ``parameters`` is set whenever derivation got that far.
    """

    polygons: List[Polygon] = field(default_factory=list)
    error: Optional[str] = None
    parameters: Optional[ThickLineParameters] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def validation(self) -> ValidationResult:
        return ValidationResult(self.ok, self.error or "")

    def to_json(self):
        return {
            "ok": self.ok,
            "error": self.error,
            "polygons": [polygon.to_json() for polygon in self.polygons],
        }

    def to_png(
        self,
        file_name: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        margin: float = 0.1,
    ) -> None:
        """
        Render the generated polygons to a PNG image.

        Args:
            file_name: Path to save the PNG file. If None, displays in a UI window instead.
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 600)
            margin: Margin around the outline as a fraction of size (default: 0.1)

        Raises:
            ValueError: If the result holds no polygons
            ImportError: If matplotlib is not installed
        """
        if not self.polygons:
            raise ValueError(f"Nothing to render: {self.error or 'no polygons'}")

        try:
            import matplotlib.pyplot as plt
            from matplotlib.patches import Polygon as MplPolygon
        except ImportError:
            raise ImportError(
                "matplotlib is required for thick line rendering. Install with: pip install matplotlib"
            )

        colors = {"body": "lightgray", "feature_a": "lightblue", "feature_b": "lightcoral"}

        fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
        ax.set_aspect("equal")

        min_x = min_y = float("inf")
        max_x = max_y = float("-inf")
        for polygon in self.polygons:
            patch = MplPolygon(
                polygon.to_numpy(),
                closed=True,
                facecolor=colors.get(polygon.role, "lightgray"),
                edgecolor="black",
                linewidth=2,
            )
            ax.add_patch(patch)
            p_min_x, p_min_y, p_max_x, p_max_y = polygon.bounds()
            min_x, min_y = min(min_x, p_min_x), min(min_y, p_min_y)
            max_x, max_y = max(max_x, p_max_x), max(max_y, p_max_y)

        x_range = max(max_x - min_x, 1e-6)
        y_range = max(max_y - min_y, 1e-6)
        ax.set_xlim(min_x - x_range * margin, max_x + x_range * margin)
        ax.set_ylim(min_y - y_range * margin, max_y + y_range * margin)

        ax.grid(True, alpha=0.3)
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.set_title("Thick Line")

        plt.tight_layout()
        if file_name:
            plt.savefig(file_name, dpi=100, bbox_inches="tight", facecolor="white")
            plt.close(fig)
        else:
            plt.show()


def build_thick_line(inputs: ThickLineInputs) -> ThickLineResult:
    """Run derivation, validation and shape generation for one thick line.

    Errors never escape: any failure is returned as ``ThickLineResult.error``
    and no polygons are produced.
    """
    try:
        params = derive_parameters(inputs)
    except ThickLineError as exc:
        logger.debug(f"Derivation failed: {exc.message}")
        return ThickLineResult(error=exc.message)

    verdict = validate_parameters(params)
    if not verdict.valid:
        logger.debug(f"Validation failed: {verdict.message}")
        return ThickLineResult(error=verdict.message, parameters=params)

    polygons = generate_shapes(params)
    logger.debug(f"Generated {len(polygons)} polygons")
    return ThickLineResult(polygons=polygons, parameters=params)
