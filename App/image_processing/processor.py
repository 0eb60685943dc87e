"""Main stipple processor orchestrating the complete pipeline.

AIDEV-NOTE: This module owns the loaded image and the current scene. It is
the change-detection layer: the sampling pass only re-runs when the image
or the parameter set changed, and preview/export always read the cached
scene without re-sampling.
"""

from dataclasses import replace
from pathlib import Path

import numpy as np
from PIL import Image

from models import (
    DEFAULT_EXPORT_FILENAME,
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    StippleParams,
    StippleScene,
)

from .errors import InvalidDimensions
from .preview import paint_preview
from .rendering import compute_stipple
from .svg_export import export_vector, save_vector
from .utils import prepare_image


class StippleProcessor:
    """Processes images into stipple scenes and serves preview/export."""

    def __init__(
        self,
        max_width: int = MAX_CANVAS_WIDTH,
        max_height: int = MAX_CANVAS_HEIGHT,
        seed: "int | None" = None,
    ):
        self.max_width = max_width
        self.max_height = max_height
        self.seed = seed

        self._image: "Image.Image | None" = None
        self._pixels: "np.ndarray | None" = None
        self._params: "StippleParams | None" = None
        self._scene = StippleScene()

    # --- Read-only state ---

    @property
    def scene(self) -> StippleScene:
        """The most recently published scene (empty before any pass)."""
        return self._scene

    @property
    def dots(self):
        return self._scene.dots

    @property
    def width(self) -> int:
        return self._scene.width

    @property
    def height(self) -> int:
        return self._scene.height

    @property
    def has_image(self) -> bool:
        return self._image is not None

    @property
    def has_scene(self) -> bool:
        """Whether a pass has completed for the current image."""
        return self._params is not None

    @property
    def invert(self) -> bool:
        return bool(self._params and self._params.invert)

    # --- Image input ---

    def load_image(self, file_path: "str | Path") -> Image.Image:
        """Load, validate and prepare an image file.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            Working RGB image at canvas size

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        try:
            image = Image.open(file_path)
            image.load()
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

        print(f"Loaded image with size: {image.width}x{image.height} pixels.")
        return self.set_image(image)

    def set_image(self, image: Image.Image) -> Image.Image:
        """Prepare a decoded image and make it the current source.

        The current scene is discarded; call update() to produce a new one.
        """
        prepared, width, height = prepare_image(
            image, self.max_width, self.max_height
        )
        if (width, height) != image.size:
            print(f"Scaled image to {width}x{height} pixels for the canvas.")

        self._image = prepared
        self._pixels = np.asarray(prepared)
        self._params = None
        self._scene = StippleScene()
        return prepared

    # --- Sampling ---

    def needs_update(self, params: StippleParams) -> bool:
        """Whether params differ from those of the current scene."""
        return self._image is not None and params != self._params

    def update(self, params: StippleParams) -> StippleScene:
        """Recompute the scene if the image or parameters changed.

        Args:
            params: Parameter set to render with

        Returns:
            The current scene (recomputed or cached)

        Raises:
            InvalidDimensions: If no image has been loaded
            DegenerateLevels: If the levels parameters are degenerate
        """
        if self._image is None:
            raise InvalidDimensions(self.width, self.height)
        if not self.needs_update(params):
            return self._scene

        width, height = self._image.size
        scene = compute_stipple(self._pixels, width, height, params, seed=self.seed)

        # AIDEV-NOTE: Publish params and scene together, after the pass
        # completes, so readers never see a partial dot list
        self._params = replace(params)
        self._scene = scene

        print(f"Stipple pass complete: {len(scene)} dots on {width}x{height}.")
        return scene

    # --- Output ---

    def render_preview(
        self,
        target: "Image.Image | None" = None,
        allow_empty: bool = True,
    ) -> Image.Image:
        """Paint the cached scene for display."""
        scene = self._scene
        return paint_preview(
            scene.dots,
            scene.width,
            scene.height,
            self.invert,
            target=target,
            allow_empty=allow_empty,
        )

    def export_svg(self) -> str:
        """Serialize the cached scene to SVG.

        Raises:
            EmptyScene: If the scene has no dots
            InvalidDimensions: If no scene has been computed
        """
        scene = self._scene
        return export_vector(scene.dots, scene.width, scene.height, self.invert)

    def save_svg(self, file_path: "str | Path" = DEFAULT_EXPORT_FILENAME) -> Path:
        """Write the cached scene to an SVG file."""
        scene = self._scene
        path = save_vector(
            scene.dots, scene.width, scene.height, self.invert, file_path
        )
        print(f"Saved {len(scene)} dots to {path}")
        return path
