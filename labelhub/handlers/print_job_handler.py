"""
Print job handler.

Create -> store -> issue URL -> fetch -> expire. The raw label-size key is
stored with the job and the layout is resolved again at retrieval time, so
edits to the layout table also apply to jobs already in flight.
"""

from urllib.parse import unquote

from pydantic import ValidationError as PydanticValidationError

from labelhub.config import settings
from labelhub.exceptions import NotFoundError, ValidationError
from labelhub.label_generation import (
    LabelSize,
    LayoutDescriptor,
    PrintSheet,
    PrintSheetRenderer,
    resolve_layout,
    rows_needed,
)
from labelhub.models.print_job import Label, PrintData, PrintJob, RetrievalHandle
from labelhub.storage.print_job_store import PrintJobStore
from labelhub.logger import bind_job_context, get_logger

logger = get_logger(__name__)


class PrintJobHandler:
    """Handles print job submission, retrieval and rendering."""

    def __init__(
        self,
        store: PrintJobStore,
        base_url: str | None = None,
        renderer: PrintSheetRenderer | None = None
    ):
        self.store = store
        self.base_url = (base_url or settings.public_base_url).rstrip("/")
        self.renderer = renderer or PrintSheetRenderer()

    def submit(
        self,
        labels: list[Label] | None,
        label_size: str | None,
        show_price: bool | None = True,
        show_condition: bool | None = True
    ) -> RetrievalHandle:
        """
        Store a print job and return where it can be fetched.

        Args:
            labels: Labels to print; must be non-empty (no upper bound)
            label_size: Raw size key; unknown values are kept as-is and render
                with the default layout
            show_price: Print prices (None means True)
            show_condition: Print conditions (None means True)

        Returns:
            RetrievalHandle with job ID, print page URL and expiry

        Raises:
            ValidationError: If labels is missing or empty
        """
        if not labels:
            raise ValidationError("Labels data is required")

        raw_size = label_size if label_size is not None else LabelSize.MEDIUM.value
        layout = resolve_layout(raw_size)

        job = PrintJob(
            labels=tuple(labels),
            label_size=raw_size,
            show_price=True if show_price is None else show_price,
            show_condition=True if show_condition is None else show_condition,
            expires_at_epoch_ms=self.store.new_expiry()
        )

        job_id = self.store.put(job)

        logger.info("Print job created", extra={
            "job_id": job_id,
            "label_count": len(job.labels),
            "label_size": raw_size,
            "resolved_layout": layout.label_size.value,
            "expires_at": job.expires_at_epoch_ms
        })

        return RetrievalHandle(
            job_id=job_id,
            retrieval_url=self.print_url(job_id),
            expires_at_epoch_ms=job.expires_at_epoch_ms
        )

    def retrieve(self, job_id: str) -> tuple[PrintJob, LayoutDescriptor]:
        """
        Fetch a stored job together with its layout.

        Raises:
            NotFoundError: If the job never existed or has expired
        """
        with bind_job_context(job_id):
            job = self.store.get(job_id)
            if job is None:
                logger.info("Print job not found or expired")
                raise NotFoundError(details={"job_id": job_id})

        return job, resolve_layout(job.label_size)

    def render(self, job_id: str) -> PrintSheet:
        """Retrieve a job and lay its labels out on a sheet."""
        job, layout = self.retrieve(job_id)
        sheet = self.renderer.build_sheet_for_job(job, layout)

        with bind_job_context(job_id):
            logger.info("Print sheet built", extra={
                "label_count": len(job.labels),
                "grid_cols": layout.grid_cols,
                "rows": rows_needed(len(job.labels), layout)
            })

        return sheet

    def render_direct(self, data: PrintData) -> PrintSheet:
        """Lay out inline print data without touching the store."""
        if not data.labels:
            raise ValidationError("Labels data is required")

        layout = resolve_layout(data.label_size)
        return self.renderer.build_sheet(
            data.labels,
            layout,
            show_price=data.show_price,
            show_condition=data.show_condition
        )

    def print_url(self, job_id: str) -> str:
        """Public URL of the print page for a job."""
        return f"{self.base_url}/print/{job_id}"

    @staticmethod
    def parse_print_data(raw: str | None) -> PrintData:
        """
        Parse the JSON payload of a direct print link.

        Accepts the payload whether or not it is still percent-encoded.

        Raises:
            ValidationError: If the payload is missing or malformed
        """
        if not raw:
            raise ValidationError("No print data provided")

        payload = raw.strip()
        if not payload.startswith("{"):
            payload = unquote(payload)

        try:
            return PrintData.model_validate_json(payload)
        except PydanticValidationError as e:
            raise ValidationError(
                "Failed to parse print data",
                details={"errors": e.error_count()}
            ) from e
