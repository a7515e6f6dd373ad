"""API routes for prompt templates and response formatting."""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from src.config.prompt_catalog import PromptCatalog
from src.models.prompt import (
    FormatRequest,
    FormatResponse,
    ModeInfo,
    PromptDetail,
    PromptMode,
)
from src.services.prompt_service.main import PromptService as ps
from src.utility.logger import AppLogger

router = APIRouter(prefix="/api/prompt", tags=["Prompt"])
logger = AppLogger.get_logger(__name__)


@router.get("/modes", response_model=List[ModeInfo])
async def list_modes(
    service: PromptCatalog = Depends(ps.get_prompt_catalog),
) -> List[ModeInfo]:
    """Return every prompt mode with its display label."""
    try:
        return service.list_modes()
    except Exception as e:
        logger.error(f"Exception Occurred : {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )


@router.get("/{mode}", response_model=PromptDetail)
async def get_prompt(
    mode: PromptMode,
    service: PromptCatalog = Depends(ps.get_prompt_catalog),
) -> PromptDetail:
    """Return the system/user instructions configured for a mode."""
    try:
        config = service.get_prompt_config(mode)
        return PromptDetail(
            mode=mode,
            label=service.get_mode_label(mode),
            system_prompt=config.system_prompt,
            user_prompt=config.user_prompt,
            response_format=config.response_format,
        )
    except Exception as e:
        logger.error(f"Exception Occurred : {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )


@router.post("/{mode}/format", response_model=FormatResponse)
async def format_response(
    mode: PromptMode,
    payload: FormatRequest,
    service: PromptCatalog = Depends(ps.get_prompt_catalog),
) -> FormatResponse:
    """Clean a raw model reply using the mode's response strategy."""
    try:
        formatted = service.format_response(mode, payload.response)
        return FormatResponse(mode=mode, formatted=formatted)
    except Exception as e:
        logger.error(f"Exception Occurred : {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
