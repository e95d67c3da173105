"""
QR code handler: request bounds plus calls into the QR encoder.
"""

import re

from labelhub.config import settings
from labelhub.exceptions import InternalError, ValidationError
from labelhub.label_generation import QRGenerator
from labelhub.logger import get_logger

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class QRHandler:
    """Validates QR requests and delegates encoding to QRGenerator."""

    def __init__(self, generator: QRGenerator | None = None):
        self.generator = generator or QRGenerator()

    def validate_size(self, size: int | str | None) -> int:
        """
        Parse and bound-check a requested image size.

        Missing or empty sizes use the default. Strings are read by their
        leading integer, so "150.5" and "150px" both mean 150.

        Raises:
            ValidationError: If size has no leading integer or falls outside
                [qr_min_size, qr_max_size]
        """
        if size is None or (isinstance(size, str) and not size.strip()):
            return settings.qr_default_size

        match = _LEADING_INT.match(str(size))
        value = int(match.group(0)) if match else None

        if value is None or not settings.qr_min_size <= value <= settings.qr_max_size:
            raise ValidationError(
                f"Size must be between {settings.qr_min_size} and {settings.qr_max_size} pixels",
                details={"size": str(size)}
            )

        return value

    @staticmethod
    def validate_urls(urls: list[str] | None, max_urls: int | None = None) -> list[str]:
        """
        Check a batch of inputs is present and, optionally, bounded.

        Raises:
            ValidationError: If urls is missing, empty, or longer than max_urls
        """
        if not urls:
            raise ValidationError("URLs are required and must be an array")

        if max_urls is not None and len(urls) > max_urls:
            raise ValidationError(
                f"Maximum {max_urls} QR codes per request",
                details={"count": len(urls), "limit": max_urls}
            )

        return urls

    def single_qr(self, url: str | None, size: int | str | None) -> bytes:
        """PNG for a single input."""
        if not url:
            raise ValidationError("URL parameter is required")

        qr_size = self.validate_size(size)
        return self._encode("single", lambda: self.generator.generate_qr(url, qr_size))

    def data_urls(self, urls: list[str] | None, size: int) -> list[dict]:
        """Inline data URLs for a batch of inputs (no batch limit)."""
        urls = self.validate_urls(urls)
        return self._encode("data_urls", lambda: self.generator.generate_batch_data_urls(urls, size))

    def zip_archive(self, urls: list[str] | None, size: int) -> bytes:
        """ZIP of PNGs for a batch of at most batch_qr_max_urls inputs."""
        urls = self.validate_urls(urls, settings.batch_qr_max_urls)
        return self._encode("zip", lambda: self.generator.generate_batch_zip(urls, size))

    def _encode(self, kind: str, encode):
        try:
            return encode()
        except Exception as e:
            logger.error("QR generation failed", extra={
                "kind": kind,
                "error": str(e)
            }, exc_info=True)
            raise InternalError("Failed to generate QR code") from e
