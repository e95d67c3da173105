"""
QR code generation for label identifiers.
"""

import base64
import io
import zipfile
import qrcode
from qrcode.image.pil import PilImage
from PIL import Image

from labelhub.config import settings
from labelhub.logger import get_logger

logger = get_logger(__name__)


class QRGenerator:
    """Generates QR code images for identifiers (URLs, product IDs)."""

    def __init__(self, margin: int | None = None):
        self.margin = settings.qr_margin if margin is None else margin

    def generate_qr(
        self,
        data: str,
        size: int = 200,
        border: int | None = None
    ) -> bytes:
        """
        Generate QR code PNG for a data string.

        Args:
            data: Data to encode (URL or product identifier)
            size: Image width and height in pixels
            border: Quiet zone in QR modules (defaults to configured margin)

        Returns:
            PNG image bytes
        """
        qr = qrcode.QRCode(
            version=None,  # Auto-determine version
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=self.margin if border is None else border
        )

        qr.add_data(data)
        qr.make(fit=True)

        img: PilImage = qr.make_image(fill_color="black", back_color="white")

        # Resize to desired size
        img = img.resize((size, size), Image.Resampling.LANCZOS)

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        buffer.seek(0)

        return buffer.getvalue()

    def generate_data_url(self, data: str, size: int = 200) -> str:
        """
        Generate QR code as a base64 PNG data URL for inline display.

        Args:
            data: Data to encode
            size: Image size in pixels

        Returns:
            "data:image/png;base64,..." string
        """
        png = self.generate_qr(data, size)
        return "data:image/png;base64," + base64.b64encode(png).decode("ascii")

    def generate_batch_data_urls(self, urls: list[str], size: int = 200) -> list[dict]:
        """
        Generate data URLs for several inputs, preserving order.

        Returns:
            List of {"url": ..., "dataUrl": ...} dicts
        """
        qr_codes = [
            {"url": url, "dataUrl": self.generate_data_url(url, size)}
            for url in urls
        ]

        logger.info("Batch QR generation complete", extra={
            "total_items": len(urls),
            "size": size
        })

        return qr_codes

    def generate_batch_zip(self, urls: list[str], size: int = 200) -> bytes:
        """
        Generate a ZIP archive with one QR PNG per input.

        Entries are named qrcode-1.png, qrcode-2.png, ... in input order.

        Args:
            urls: Data strings to encode
            size: Image size in pixels

        Returns:
            ZIP archive bytes

        Example:
            >>> archive = generator.generate_batch_zip(["https://a", "https://b"])
            >>> zipfile.ZipFile(io.BytesIO(archive)).namelist()
            ['qrcode-1.png', 'qrcode-2.png']
        """
        buffer = io.BytesIO()

        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for index, url in enumerate(urls, start=1):
                archive.writestr(f"qrcode-{index}.png", self.generate_qr(url, size))

        logger.info("Batch QR archive complete", extra={
            "total_items": len(urls),
            "size": size,
            "archive_bytes": buffer.tell()
        })

        return buffer.getvalue()
