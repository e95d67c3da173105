"""
QR code routes.
Single PNG, inline data URLs, and ZIP bundles of PNGs.
"""

from fastapi import APIRouter, Depends, HTTPException, status, Response, Query
from pydantic import BaseModel, Field

from labelhub.config import settings
from labelhub.dependencies import get_qr_handler
from labelhub.exceptions import InternalError, ValidationError
from labelhub.handlers.qr_handler import QRHandler
from labelhub.models.common import ErrorResponse

router = APIRouter()


# Request Models
class QRCodeRequest(BaseModel):
    """Request for a single QR code image."""
    url: str | None = Field(None, description="Data to encode")
    size: int | str = Field(200, description="Image size in pixels (100-1000)")


class QRBatchRequest(BaseModel):
    """Request for QR codes for several inputs."""
    urls: list[str] | None = Field(None, description="Data strings to encode")
    size: int = Field(200, gt=0, le=2000, description="Image size in pixels")


class QRCodeItem(BaseModel):
    url: str
    dataUrl: str


class QRBatchResponse(BaseModel):
    qrCodes: list[QRCodeItem]


def _png_response(png: bytes) -> Response:
    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": f"public, max-age={settings.qr_cache_max_age_seconds}"}
    )


def _http_error(e: ValidationError | InternalError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "message": e.message}
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": "generation_failed", "message": e.message}
    )


@router.get(
    "/qr",
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Missing URL or size out of range"},
        500: {"model": ErrorResponse, "description": "Generation failed"}
    },
    summary="Generate QR code",
    description="""
    Generate a QR code PNG for a URL or identifier.

    Print pages reference this endpoint for every label, passing the
    pixel size of the selected label layout. Responses are cacheable.
    """
)
async def get_qr(
    url: str | None = Query(None, description="Data to encode"),
    size: str | None = Query(None, description="Image size in pixels (100-1000)"),
    handler: QRHandler = Depends(get_qr_handler)
):
    """Generate QR code PNG from query parameters."""
    try:
        return _png_response(handler.single_qr(url, size))
    except (ValidationError, InternalError) as e:
        raise _http_error(e) from e


@router.post(
    "/qr",
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Missing URL or size out of range"},
        500: {"model": ErrorResponse, "description": "Generation failed"}
    },
    summary="Generate QR code (POST)"
)
async def post_qr(
    request: QRCodeRequest,
    handler: QRHandler = Depends(get_qr_handler)
):
    """Generate QR code PNG from a JSON body."""
    try:
        return _png_response(handler.single_qr(request.url, request.size))
    except (ValidationError, InternalError) as e:
        raise _http_error(e) from e


@router.post(
    "/generate-qr",
    response_model=QRBatchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No URLs supplied"},
        500: {"model": ErrorResponse, "description": "Generation failed"}
    },
    summary="Generate QR codes as data URLs"
)
async def generate_qr_codes(
    request: QRBatchRequest,
    handler: QRHandler = Depends(get_qr_handler)
):
    """
    Generate inline QR codes for a list of URLs.

    Returns:
        {"qrCodes": [{"url": ..., "dataUrl": "data:image/png;base64,..."}]}
    """
    try:
        return {"qrCodes": handler.data_urls(request.urls, request.size)}
    except (ValidationError, InternalError) as e:
        raise _http_error(e) from e


@router.post(
    "/batch-qr",
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "No URLs supplied or too many"},
        500: {"model": ErrorResponse, "description": "Generation failed"}
    },
    summary="Download QR codes as ZIP",
    description="""
    Generate a ZIP archive of QR code PNGs (qrcode-1.png, qrcode-2.png, ...).

    At most 50 URLs per request.
    """
)
async def batch_qr_zip(
    request: QRBatchRequest,
    handler: QRHandler = Depends(get_qr_handler)
):
    """Generate ZIP of QR codes."""
    try:
        archive = handler.zip_archive(request.urls, request.size)
    except (ValidationError, InternalError) as e:
        raise _http_error(e) from e

    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": "attachment; filename=qrcodes.zip"}
    )
