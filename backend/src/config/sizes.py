"""Output size presets and hard limits accepted by the downstream image generator."""

from typing import Tuple
from src.models.size import Dimensions, RecommendedSize


RECOMMENDED_SIZES: Tuple[RecommendedSize, ...] = (
    RecommendedSize(width=1024, height=1024, ratio=1.0),  # square
    RecommendedSize(width=768, height=1344, ratio=0.571),  # portrait 9:16
    RecommendedSize(width=864, height=1152, ratio=0.75),  # portrait 3:4
    RecommendedSize(width=1344, height=768, ratio=1.75),  # landscape 16:9
    RecommendedSize(width=1152, height=864, ratio=1.333),  # landscape 4:3
    RecommendedSize(width=1440, height=720, ratio=2.0),  # ultra-wide 2:1
    RecommendedSize(width=720, height=1440, ratio=0.5),  # ultra-tall 1:2
)

DEFAULT_SIZE = Dimensions(width=1024, height=1024)

MIN_SIDE = 512
MAX_SIDE = 2048
SIDE_STEP = 16
MAX_PIXELS = 2**21  # 2,097,152

MAX_UPLOAD_BYTES = 20 * 1024 * 1024
UPLOAD_CHUNK_BYTES = 1024 * 1024

__all__ = [
    "RECOMMENDED_SIZES",
    "DEFAULT_SIZE",
    "MIN_SIDE",
    "MAX_SIDE",
    "SIDE_STEP",
    "MAX_PIXELS",
    "MAX_UPLOAD_BYTES",
    "UPLOAD_CHUNK_BYTES",
]
