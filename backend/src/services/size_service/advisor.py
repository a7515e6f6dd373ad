"""Choose, validate, and describe output sizes for image generation."""

import io
import asyncio
from pathlib import Path
from typing import BinaryIO, List, Union
from PIL import Image

from src.config.sizes import (
    DEFAULT_SIZE,
    MAX_PIXELS,
    MAX_SIDE,
    MIN_SIDE,
    RECOMMENDED_SIZES,
    SIDE_STEP,
)
from src.handlers.error_handler import MapExceptions
from src.models.size import (
    Dimensions,
    RecommendedSize,
    SizeSuggestion,
    ValidationResult,
)
from src.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)

ImageSource = Union[bytes, bytearray, str, Path]


class SizeAdvisor:
    """Pick generator-friendly output sizes from a source image's aspect ratio.

    Everything except measure_image is pure and synchronous.
    measure_image decodes in a worker thread and releases its handle on every path.
    """

    def __init__(self):
        """Set up the exception mapper used for image loading failures."""
        self.exceptions = MapExceptions()

    async def measure_image(self, source: ImageSource) -> Dimensions:
        """
        Decode an image from raw bytes or a file path and return its intrinsic size.
        Raises ImageLoadError when the image cannot be opened or decoded.
        """
        return await asyncio.to_thread(self._read_dimensions, source)

    def _open_handle(self, source: ImageSource) -> BinaryIO:
        """Create the transient handle Pillow reads from."""
        if isinstance(source, (bytes, bytearray)):
            return io.BytesIO(source)
        return open(source, "rb")

    def _read_dimensions(self, source: ImageSource) -> Dimensions:
        """Blocking part of measure_image."""
        try:
            handle = self._open_handle(source)
        except OSError as e:
            raise self.exceptions.map_image_exception(e) from e

        try:
            with Image.open(handle) as img:
                img.load()
                width, height = img.size
        except Exception as e:
            raise self.exceptions.map_image_exception(e) from e
        finally:
            handle.close()

        logger.debug(f"Measured image: {width}x{height}")
        return Dimensions(width=width, height=height)

    def select_best_size(self, original_width: float, original_height: float) -> Dimensions:
        """
        Return the preset whose ratio is closest to the source ratio.
        Ties keep the earlier candidate, starting from the default square.
        """
        if original_height == 0:
            raise ValueError("original_height must be non-zero")

        original_ratio = original_width / original_height

        best_size = DEFAULT_SIZE
        min_difference = abs(original_ratio - 1.0)

        for size in RECOMMENDED_SIZES:
            difference = abs(original_ratio - size.ratio)
            if difference < min_difference:
                min_difference = difference
                best_size = Dimensions(width=size.width, height=size.height)

        return best_size

    def validate_custom_size(self, width: float, height: float) -> ValidationResult:
        """Check a user-entered size; only the first violated rule is reported."""
        if width < MIN_SIDE or width > MAX_SIDE:
            return ValidationResult(
                valid=False,
                error=f"width out of range: must be between {MIN_SIDE}px and {MAX_SIDE}px",
            )

        if height < MIN_SIDE or height > MAX_SIDE:
            return ValidationResult(
                valid=False,
                error=f"height out of range: must be between {MIN_SIDE}px and {MAX_SIDE}px",
            )

        if width % SIDE_STEP != 0:
            return ValidationResult(
                valid=False,
                error=f"width not divisible by {SIDE_STEP}: must be a multiple of {SIDE_STEP}px",
            )

        if height % SIDE_STEP != 0:
            return ValidationResult(
                valid=False,
                error=f"height not divisible by {SIDE_STEP}: must be a multiple of {SIDE_STEP}px",
            )

        if width * height > MAX_PIXELS:
            return ValidationResult(
                valid=False,
                error=f"pixel budget exceeded: total pixels must not exceed {MAX_PIXELS:,} px",
            )

        return ValidationResult(valid=True)

    @staticmethod
    def format_size(width: float, height: float) -> str:
        """Render a size as '<width>x<height>'."""
        return f"{width}x{height}"

    @staticmethod
    def describe_size(width: float, height: float) -> str:
        """Classify a size into a coarse orientation label."""
        if height == 0:
            raise ValueError("height must be non-zero")

        ratio = width / height

        # bands are intentionally asymmetric around 1.0
        if abs(ratio - 1.0) < 0.1:
            return "square"
        elif ratio > 1.5:
            return "landscape (wide)"
        elif ratio < 0.67:
            return "portrait (tall)"
        elif ratio > 1.0:
            return "landscape (near-square)"
        else:
            return "portrait (near-square)"

    def suggest(self, width: int, height: int) -> SizeSuggestion:
        """Bundle the best preset, its size string, and its description."""
        best = self.select_best_size(width, height)
        return SizeSuggestion(
            original=Dimensions(width=width, height=height),
            recommended=best,
            size=self.format_size(best.width, best.height),
            description=self.describe_size(best.width, best.height),
        )

    @staticmethod
    def recommended_sizes() -> List[RecommendedSize]:
        """Return the preset list in its defined order."""
        return list(RECOMMENDED_SIZES)
