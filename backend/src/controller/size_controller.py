"""API routes for output size presets, selection, validation, and measurement."""

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from src.config import sizes
from src.config.sizes import DEFAULT_SIZE
from src.handlers.error_handler import ImageLoadError, ImageProcessingError
from src.models.size import (
    CustomSizeRequest,
    SizeCatalog,
    SizeSuggestion,
    ValidationResult,
)
from src.services.size_service.advisor import SizeAdvisor
from src.services.size_service.main import SizeService as ss
from src.utility.logger import AppLogger

router = APIRouter(prefix="/api/size", tags=["Size"])
logger = AppLogger.get_logger(__name__)


async def read_upload(file: UploadFile) -> bytes:
    """Read an upload in chunks, refusing anything above the configured byte cap."""
    limit = sizes.MAX_UPLOAD_BYTES
    buf = bytearray()
    while True:
        chunk = await file.read(sizes.UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > limit:
            raise ImageLoadError(
                message=f"Upload exceeds the {limit:,} byte limit.",
                status_code=413,
                error_type="upload_too_large",
                details={"max_bytes": limit},
            )
    return bytes(buf)


@router.get("/recommended", response_model=SizeCatalog)
async def recommended(
    service: SizeAdvisor = Depends(ss.get_size_advisor),
) -> SizeCatalog:
    """Return the default size and all recommended presets."""
    return SizeCatalog(default=DEFAULT_SIZE, sizes=service.recommended_sizes())


@router.get("/best", response_model=SizeSuggestion)
async def best_size(
    width: int = Query(..., gt=0),
    height: int = Query(..., gt=0),
    service: SizeAdvisor = Depends(ss.get_size_advisor),
) -> SizeSuggestion:
    """Return the preset closest to the aspect ratio of the given dimensions."""
    try:
        return service.suggest(width, height)
    except Exception as e:
        logger.error(f"Exception Occurred : {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )


@router.post("/validate", response_model=ValidationResult)
async def validate_size(
    payload: CustomSizeRequest,
    service: SizeAdvisor = Depends(ss.get_size_advisor),
) -> ValidationResult:
    """
    Check a custom size against the generator limits.
    An invalid size is a normal result, not an HTTP error.
    """
    result = service.validate_custom_size(payload.width, payload.height)
    if not result.valid:
        logger.info(f"Rejected custom size {payload.width}x{payload.height}: {result.error}")
    return result


@router.post("/measure", response_model=SizeSuggestion)
async def measure(
    file: UploadFile = File(...),
    service: SizeAdvisor = Depends(ss.get_size_advisor),
) -> SizeSuggestion:
    """Measure an uploaded image and suggest the closest output size."""
    try:
        raw_bytes = await read_upload(file)
        dimensions = await service.measure_image(raw_bytes)
        logger.info(f"Measured upload {file.filename}: {dimensions.width}x{dimensions.height}")
        return service.suggest(dimensions.width, dimensions.height)
    except ImageProcessingError:
        raise
    except Exception as e:
        logger.error(f"Measure endpoint error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected error while measuring image.",
        )
    finally:
        await file.close()
