"""Pydantic models for image dimensions, size presets, and validation results."""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class Dimensions(BaseModel):
    """A width/height pair in pixels."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int


class RecommendedSize(BaseModel):
    """A generator-friendly size preset with its precomputed aspect ratio."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    ratio: float


class ValidationResult(BaseModel):
    """Outcome of a custom size check; error names the first violated rule."""

    valid: bool
    error: Optional[str] = None


class SizeSuggestion(BaseModel):
    """Source dimensions together with the closest preset and its labels."""

    original: Dimensions
    recommended: Dimensions
    size: str
    description: str


class SizeCatalog(BaseModel):
    """Preset list served to clients."""

    default: Dimensions
    sizes: List[RecommendedSize] = Field(default_factory=list)


class CustomSizeRequest(BaseModel):
    """Candidate output size entered by a user; the advisor judges every number."""

    width: Union[int, float]
    height: Union[int, float]

    model_config = {
        "extra": "ignore",
    }
