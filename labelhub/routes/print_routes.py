"""
Print job routes.
Submit a batch of labels for printing and fetch it back by job ID.
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query

from labelhub.dependencies import get_print_job_handler
from labelhub.exceptions import NotFoundError, ValidationError
from labelhub.handlers.print_job_handler import PrintJobHandler
from labelhub.label_generation import LayoutDescriptor, resolve_layout
from labelhub.models.common import ErrorResponse
from labelhub.models.print_job import PrintJob, PrintLabelsRequest, PrintLabelsResponse
from labelhub.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/print-labels",
    response_model=PrintLabelsResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "No labels supplied"},
        500: {"model": ErrorResponse, "description": "Failed to store print job"}
    },
    summary="Create print job",
    description="""
    Store a batch of labels as a short-lived print job.

    - Returns a print page URL that another device can open
    - Jobs expire 30 minutes after submission
    - Unknown label sizes are accepted and print with the medium layout
    - No limit on the number of labels
    """
)
async def create_print_job(
    request: PrintLabelsRequest,
    handler: PrintJobHandler = Depends(get_print_job_handler)
):
    """
    Create a print job.

    Args:
        request: Labels plus layout and display flags
        handler: Print job handler bound to the application store

    Returns:
        Job ID, print URL and expiry

    Raises:
        HTTPException: 400 if labels are missing
    """
    try:
        handle = handler.submit(
            labels=request.labels,
            label_size=request.label_size,
            show_price=request.show_price,
            show_condition=request.show_condition
        )

    except ValidationError as e:
        logger.warning("Invalid print request", extra={
            "error": e.message
        })
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "message": e.message}
        ) from e

    return PrintLabelsResponse(
        job_id=handle.job_id,
        print_url=handle.retrieval_url,
        retrieval_url=handle.retrieval_url,
        expires_at=handle.expires_at_epoch_ms
    )


@router.get(
    "/get-print-job",
    response_model=PrintJob,
    responses={
        400: {"model": ErrorResponse, "description": "Missing job ID"},
        404: {"model": ErrorResponse, "description": "Print job not found or expired"}
    },
    summary="Fetch print job",
    description="""
    Return a stored print job (labels, labelSize, showPrice, showCondition,
    expires). The caller resolves the label layout from labelSize.
    """
)
async def get_print_job(
    id: str | None = Query(None, description="Print job ID"),
    handler: PrintJobHandler = Depends(get_print_job_handler)
):
    """Fetch a print job by ID."""
    if not id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "message": "Print job ID is required"}
        )

    try:
        job, _layout = handler.retrieve(id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "message": e.message}
        ) from e

    return job


@router.get(
    "/layouts/{label_size}",
    response_model=LayoutDescriptor,
    summary="Resolve label layout",
    description="Layout for a label size. Unknown sizes return the medium layout."
)
async def get_layout(label_size: str):
    """Resolve the layout descriptor for a label size."""
    return resolve_layout(label_size)
