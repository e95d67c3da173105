"""
FastAPI dependencies for application-scoped services.
"""

from fastapi import Depends, Request

from labelhub.handlers.print_job_handler import PrintJobHandler
from labelhub.handlers.qr_handler import QRHandler
from labelhub.storage.print_job_store import PrintJobStore


def get_print_job_store(request: Request) -> PrintJobStore:
    """Print job store owned by the running application (see main.lifespan)."""
    return request.app.state.print_job_store


def get_print_job_handler(
    store: PrintJobStore = Depends(get_print_job_store)
) -> PrintJobHandler:
    return PrintJobHandler(store)


def get_qr_handler() -> QRHandler:
    return QRHandler()
