"""Error handling helpers for mapping image loading failures to API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from PIL import Image, UnidentifiedImageError
from src.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)


@dataclass
class ImageProcessingError(Exception):
    """
    Base error for failures while handling user-supplied images.
    This is what FastAPI will ultimately handle and send as JSON.
    """

    source: str
    message: str
    status_code: int = 500
    error_type: str = "processing_error"
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        """Format a readable representation for logging and responses."""
        return f"[{self.source}] {self.error_type}: {self.message}"


class ImageLoadError(ImageProcessingError):
    """
    Raised when an image cannot be opened or decoded to read its dimensions.
    The caller decides whether to ask the user for another upload.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 422,
        error_type: str = "load_error",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            source="image_loader",
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
        )


class MapExceptions:
    """Translate low-level image library exceptions into API-friendly errors.

    Encapsulates reusable handlers so the FastAPI app can remain clean.
    """

    def map_image_exception(self, exc: Exception) -> ImageLoadError:
        """
        Map Pillow / OS exceptions raised while loading an image
        to a clean domain error.
        """
        logger.error("Image could not be loaded", exc_info=exc)

        if isinstance(exc, Image.DecompressionBombError):
            return ImageLoadError(
                message="Image is too large to be decoded safely.",
                status_code=413,
                error_type="image_too_large",
            )
        if isinstance(exc, UnidentifiedImageError):
            return ImageLoadError(
                message="Unable to load image: unsupported or corrupted file.",
                status_code=422,
                error_type="unsupported_format",
            )
        if isinstance(exc, FileNotFoundError):
            return ImageLoadError(
                message="Unable to load image: file not found.",
                status_code=404,
                error_type="not_found",
            )
        if isinstance(exc, OSError):
            return ImageLoadError(
                message="Unable to load image: decoding failed.",
                status_code=422,
                error_type="load_error",
            )

        return ImageLoadError(
            message="An unexpected error occurred while loading the image.",
            status_code=500,
            error_type="unknown_error",
            details={"exception_type": exc.__class__.__name__},
        )

    @staticmethod
    def register_exception_handlers(app: FastAPI) -> None:
        """
        Call this once in the main FastAPI app to register handlers:

            app = FastAPI()
            MapExceptions.register_exception_handlers(app)
        """

        @app.exception_handler(ImageProcessingError)
        async def image_processing_error_handler(
            request: Request, exc: ImageProcessingError
        ) -> JSONResponse:
            logger.error(
                "ImageProcessingError caught by FastAPI handler",
                extra={"source": exc.source, "type": exc.error_type},
            )

            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "status": "error",
                    "source": exc.source,
                    "error_type": exc.error_type,
                    "message": exc.message,
                    "details": exc.details,
                },
            )
