"""
Print sheet rendering.

Turns a print job and its resolved layout into rows of label cells and a
print page template. QR images are not embedded; each cell points at the
QR endpoint with the layout's pixel size.
"""

from dataclasses import dataclass, field
from urllib.parse import quote

from labelhub.label_generation.label_layout import LayoutDescriptor
from labelhub.models.print_job import Label, PrintJob

QR_ENDPOINT = "/api/qr"


@dataclass(frozen=True)
class LabelCell:
    """One label placed on the sheet."""

    label: Label
    row: int
    col: int
    qr_src: str
    show_condition: bool
    show_price: bool


@dataclass(frozen=True)
class PrintSheet:
    """Labels arranged on a grid for one layout."""

    layout: LayoutDescriptor
    rows: list[list[LabelCell]] = field(default_factory=list)

    @property
    def label_count(self) -> int:
        return sum(len(row) for row in self.rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def qr_image_src(identifier: str, size: int) -> str:
    """URL of the QR image for an identifier at the given pixel size."""
    return f"{QR_ENDPOINT}?url={quote(identifier, safe='')}&size={size}"


class PrintSheetRenderer:
    """Lays labels out on a grid for the print page templates."""

    def build_sheet(
        self,
        labels: list[Label] | tuple[Label, ...],
        layout: LayoutDescriptor,
        show_price: bool = True,
        show_condition: bool = True
    ) -> PrintSheet:
        """
        Arrange labels row by row, layout.grid_cols per row.

        Every label is placed; the row count is ceil(len(labels) / grid_cols)
        regardless of layout.grid_rows.
        """
        cols = layout.grid_cols
        rows: list[list[LabelCell]] = []

        for index, label in enumerate(labels):
            row, col = divmod(index, cols)
            if col == 0:
                rows.append([])
            rows[row].append(LabelCell(
                label=label,
                row=row,
                col=col,
                qr_src=qr_image_src(label.identifier, layout.qr_pixel_size),
                show_condition=show_condition and bool(label.condition),
                show_price=show_price
            ))

        return PrintSheet(layout=layout, rows=rows)

    def build_sheet_for_job(self, job: PrintJob, layout: LayoutDescriptor) -> PrintSheet:
        """Arrange the labels of a stored print job."""
        return self.build_sheet(
            job.labels,
            layout,
            show_price=job.show_price,
            show_condition=job.show_condition
        )
