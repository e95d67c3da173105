"""
Label generation package: QR images, label layouts and print sheets.
"""

from labelhub.label_generation.qr_generator import QRGenerator
from labelhub.label_generation.label_layout import (
    LabelSize,
    LayoutDescriptor,
    resolve_layout,
    rows_needed,
)
from labelhub.label_generation.print_sheet import PrintSheet, PrintSheetRenderer

__all__ = [
    "QRGenerator",
    "LabelSize",
    "LayoutDescriptor",
    "resolve_layout",
    "rows_needed",
    "PrintSheet",
    "PrintSheetRenderer",
]
