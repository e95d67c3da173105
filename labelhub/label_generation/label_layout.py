"""
Label layout table for the supported physical label formats.

Maps a label-size key to the geometry and typography used when laying
labels out on a print sheet:

+---------+-------+--------+------+------+------+-------+---------------------+
| size    | width | height | cols | rows | gap  | qr px | title / text / price|
+---------+-------+--------+------+------+------+-------+---------------------+
| small   | 2in   | 1in    | 3    | 10   | 0.05 | 110   | 11 / 9 / 14         |
| medium  | 2.25in| 1.25in | 3    | 8    | 0.05 | 130   | 13 / 11 / 16        |
| large   | 3in   | 2in    | 2    | 5    | 0.1  | 160   | 16 / 13 / 22        |
| dymo5xl | 1.5in | 1.5in  | 4    | 4    | 0    | 120   | 12 / 10 / 16        |
+---------+-------+--------+------+------+------+-------+---------------------+

Unrecognized keys fall back to the medium layout instead of raising.
"""

import math
from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict


class LabelSize(str, Enum):
    """Known label formats, plus UNKNOWN for anything else."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    DYMO5XL = "dymo5xl"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "LabelSize":
        """
        Map free text onto a LabelSize. Matching is exact (case-sensitive).

        Args:
            value: Raw size key from a request

        Returns:
            Matching LabelSize, or LabelSize.UNKNOWN
        """
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


DEFAULT_LABEL_SIZE = LabelSize.MEDIUM


class FontSizes(BaseModel):
    """Font sizes in CSS pixels."""

    model_config = ConfigDict(frozen=True)

    title: int
    text: int
    price: int


class LayoutDescriptor(BaseModel):
    """Resolved geometry and typography for one label format."""

    model_config = ConfigDict(frozen=True)

    label_size: LabelSize
    width_in: float
    height_in: float
    grid_cols: int
    grid_rows: int  # Presentation hint, not a cap on labels per sheet
    gap_in: float
    qr_pixel_size: int
    font_sizes: FontSizes


_LAYOUTS: dict[LabelSize, LayoutDescriptor] = {
    LabelSize.SMALL: LayoutDescriptor(
        label_size=LabelSize.SMALL,
        width_in=2.0,
        height_in=1.0,
        grid_cols=3,
        grid_rows=10,
        gap_in=0.05,
        qr_pixel_size=110,
        font_sizes=FontSizes(title=11, text=9, price=14),
    ),
    LabelSize.MEDIUM: LayoutDescriptor(
        label_size=LabelSize.MEDIUM,
        width_in=2.25,
        height_in=1.25,
        grid_cols=3,
        grid_rows=8,
        gap_in=0.05,
        qr_pixel_size=130,
        font_sizes=FontSizes(title=13, text=11, price=16),
    ),
    LabelSize.LARGE: LayoutDescriptor(
        label_size=LabelSize.LARGE,
        width_in=3.0,
        height_in=2.0,
        grid_cols=2,
        grid_rows=5,
        gap_in=0.1,
        qr_pixel_size=160,
        font_sizes=FontSizes(title=16, text=13, price=22),
    ),
    LabelSize.DYMO5XL: LayoutDescriptor(
        label_size=LabelSize.DYMO5XL,
        width_in=1.5,
        height_in=1.5,
        grid_cols=4,
        grid_rows=4,
        gap_in=0.0,
        qr_pixel_size=120,
        font_sizes=FontSizes(title=12, text=10, price=16),
    ),
}


def layout_for(label_size: LabelSize) -> LayoutDescriptor:
    """Return the layout for a parsed size; UNKNOWN gets the default layout."""
    if label_size is LabelSize.UNKNOWN:
        return _LAYOUTS[DEFAULT_LABEL_SIZE]
    return _LAYOUTS[label_size]


@lru_cache(maxsize=64)
def _resolve_cached(label_size: str) -> LayoutDescriptor:
    return layout_for(LabelSize.parse(label_size))


def resolve_layout(label_size: str | None) -> LayoutDescriptor:
    """
    Resolve a raw label-size key to its layout descriptor.

    Never raises: unknown, empty or missing keys resolve to the medium layout.

    Args:
        label_size: Raw size key (e.g. "large", "dymo5xl", "bogus")

    Returns:
        Fully populated LayoutDescriptor

    Example:
        >>> resolve_layout("large").grid_cols
        2
        >>> resolve_layout("bogus") == resolve_layout("medium")
        True
    """
    if not isinstance(label_size, str):
        return layout_for(DEFAULT_LABEL_SIZE)
    return _resolve_cached(label_size)


def rows_needed(label_count: int, layout: LayoutDescriptor) -> int:
    """
    Number of grid rows needed for label_count labels.

    This is ceil(label_count / grid_cols); layout.grid_rows plays no part.
    """
    if label_count <= 0:
        return 0
    return math.ceil(label_count / layout.grid_cols)


def known_label_sizes() -> list[str]:
    """Size keys accepted without falling back."""
    return [size.value for size in _LAYOUTS]
