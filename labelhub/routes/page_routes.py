"""
Printable HTML pages.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from labelhub.dependencies import get_print_job_handler
from labelhub.exceptions import NotFoundError, ValidationError
from labelhub.handlers.print_job_handler import PrintJobHandler
from labelhub.label_generation import PrintSheet
from labelhub.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
AUTO_PRINT_DELAY_MS = 1000

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _sheet_response(request: Request, sheet: PrintSheet, auto_print: bool = True) -> HTMLResponse:
    logger.debug("Rendering print sheet", extra={
        "label_size": sheet.layout.label_size.value,
        "labels": sheet.label_count,
        "rows": sheet.row_count
    })

    return templates.TemplateResponse(
        request,
        "print_sheet.html",
        {
            "sheet": sheet,
            "layout": sheet.layout,
            "auto_print": auto_print,
            "auto_print_delay_ms": AUTO_PRINT_DELAY_MS
        }
    )


def _message_response(request: Request, title: str, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "message.html",
        {"title": title, "message": message},
        status_code=status_code
    )


@router.get("/print/{job_id}", response_class=HTMLResponse, summary="Print page for a stored job")
async def print_page(
    request: Request,
    job_id: str,
    auto_print: bool = Query(True, description="Open the print dialog after loading"),
    handler: PrintJobHandler = Depends(get_print_job_handler)
):
    """Render a stored print job; 404 page if it is missing or expired."""
    try:
        sheet = handler.render(job_id)
    except NotFoundError as e:
        return _message_response(
            request,
            "Print job not found or expired",
            e.message,
            status.HTTP_404_NOT_FOUND
        )

    return _sheet_response(request, sheet, auto_print)


@router.get("/print-direct", response_class=HTMLResponse, summary="Print page for inline data")
async def print_direct_page(
    request: Request,
    data: str | None = Query(None, description="URL-encoded JSON print data"),
    auto_print: bool = Query(True, description="Open the print dialog after loading"),
    handler: PrintJobHandler = Depends(get_print_job_handler)
):
    """Render labels passed directly in the query string."""
    try:
        sheet = handler.render_direct(handler.parse_print_data(data))
    except ValidationError as e:
        logger.warning("Invalid direct print data", extra={"error": e.message})
        return _message_response(request, "Error", e.message, status.HTTP_400_BAD_REQUEST)

    return _sheet_response(request, sheet, auto_print)
