"""Pydantic models for prompt modes, catalog entries, and formatting payloads."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class PromptMode(str, Enum):
    """Selector for which prompt template and response formatting to use."""

    DETAILED = "detailed"
    BRIEF = "brief"
    MIDJOURNEY = "midjourney"


class ResponseFormat(str, Enum):
    """Named post-processing strategies applied to raw model output."""

    IDENTITY = "identity"
    STRIP_QUOTES_AND_TRIM = "strip_quotes_and_trim"


class PromptConfig(BaseModel):
    """System/user instruction pair plus the strategy used to clean the reply."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    system_prompt: str = Field(..., min_length=1)
    user_prompt: str = Field(..., min_length=1)
    response_format: ResponseFormat = ResponseFormat.IDENTITY


class ModeInfo(BaseModel):
    """A mode identifier paired with its display label."""

    mode: PromptMode
    label: str


class PromptDetail(BaseModel):
    """Full catalog entry as served to clients."""

    mode: PromptMode
    label: str
    system_prompt: str
    user_prompt: str
    response_format: ResponseFormat


class FormatRequest(BaseModel):
    """Raw model output to be cleaned for a given mode."""

    response: str

    model_config = {
        "extra": "ignore",
    }


class FormatResponse(BaseModel):
    """Cleaned model output."""

    mode: PromptMode
    formatted: str
