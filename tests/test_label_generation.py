"""
Tests for label generation (QR codes and print sheets).
"""

import io
import zipfile
from io import BytesIO

import pytest
from PIL import Image

from labelhub.exceptions import InternalError, ValidationError
from labelhub.handlers.qr_handler import QRHandler
from labelhub.label_generation import PrintSheetRenderer, QRGenerator, resolve_layout
from labelhub.label_generation.print_sheet import qr_image_src


class TestQRGenerator:
    """Tests for QR code generation."""

    def test_generate_qr(self):
        """Test QR code generation for a URL."""
        generator = QRGenerator()

        qr_bytes = generator.generate_qr("https://cardhub-qr.vercel.app/p/BS-004")

        assert isinstance(qr_bytes, bytes)
        img = Image.open(BytesIO(qr_bytes))
        assert img.format == "PNG"
        assert img.size == (200, 200)  # Default size

    def test_qr_code_custom_size(self):
        """Test QR code with the pixel size of a label layout."""
        generator = QRGenerator()

        qr_bytes = generator.generate_qr("BS-002", size=resolve_layout("large").qr_pixel_size)

        img = Image.open(BytesIO(qr_bytes))
        assert img.size == (160, 160)

    def test_qr_code_consistency(self):
        """Test that same input produces same QR code."""
        generator = QRGenerator()

        assert generator.generate_qr("BS-002") == generator.generate_qr("BS-002")

    def test_generate_data_url(self):
        generator = QRGenerator()

        data_url = generator.generate_data_url("BS-002", size=120)

        assert data_url.startswith("data:image/png;base64,")

    def test_generate_batch_data_urls_preserves_order(self):
        generator = QRGenerator()

        qr_codes = generator.generate_batch_data_urls(["a", "b", "c"], size=100)

        assert [qr["url"] for qr in qr_codes] == ["a", "b", "c"]
        assert all(qr["dataUrl"].startswith("data:image/png;base64,") for qr in qr_codes)

    def test_generate_batch_zip(self):
        generator = QRGenerator()

        archive = generator.generate_batch_zip(["https://a.example", "https://b.example"], size=100)

        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            assert zf.namelist() == ["qrcode-1.png", "qrcode-2.png"]
            img = Image.open(BytesIO(zf.read("qrcode-2.png")))
            assert img.size == (100, 100)


class TestQRHandler:
    """Tests for QR request validation."""

    @pytest.mark.parametrize("size,expected", [
        (None, 200), ("", 200), ("  ", 200), ("100", 100), (1000, 1000),
        ("250", 250), ("150.5", 150), ("150px", 150), (" 300", 300)
    ])
    def test_valid_sizes(self, size, expected):
        assert QRHandler().validate_size(size) == expected

    @pytest.mark.parametrize("size", ["99", 1001, "abc", "12.5", "px150", "-150"])
    def test_invalid_sizes(self, size):
        with pytest.raises(ValidationError):
            QRHandler().validate_size(size)

    def test_single_qr_requires_url(self):
        with pytest.raises(ValidationError):
            QRHandler().single_qr(None, 200)

    def test_zip_limit(self):
        handler = QRHandler()

        with pytest.raises(ValidationError) as exc_info:
            handler.zip_archive([f"u{i}" for i in range(51)], 100)

        assert "Maximum 50" in exc_info.value.message

    def test_zip_accepts_fifty(self):
        archive = QRHandler().zip_archive([f"u{i}" for i in range(50)], 100)

        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            assert len(zf.namelist()) == 50

    def test_data_urls_require_input(self):
        with pytest.raises(ValidationError):
            QRHandler().data_urls([], 200)

    def test_encoder_failure_is_internal_error(self):
        class BrokenGenerator(QRGenerator):
            def generate_qr(self, data, size=200, border=None):
                raise RuntimeError("encoder exploded at 0xdeadbeef")

        with pytest.raises(InternalError) as exc_info:
            QRHandler(BrokenGenerator()).single_qr("x", 200)

        assert "0xdeadbeef" not in exc_info.value.message


class TestPrintSheetRenderer:
    """Tests for print sheet layout and HTML."""

    def test_cells_carry_grid_positions(self, sample_labels):
        sheet = PrintSheetRenderer().build_sheet(sample_labels, resolve_layout("large"))

        positions = [(cell.row, cell.col) for row in sheet.rows for cell in row]
        assert positions == [(0, 0), (0, 1), (1, 0)]

    def test_qr_src_uses_layout_pixel_size(self, sample_labels):
        sheet = PrintSheetRenderer().build_sheet(sample_labels, resolve_layout("small"))

        cell = sheet.rows[0][0]
        assert cell.qr_src == qr_image_src(sample_labels[0].identifier, 110)
        assert cell.qr_src.startswith("/api/qr?url=https%3A%2F%2Fcardhub-qr.vercel.app")
        assert cell.qr_src.endswith("&size=110")

    def test_condition_shown_only_when_present_and_enabled(self, sample_labels):
        renderer = PrintSheetRenderer()

        shown = renderer.build_sheet(sample_labels, resolve_layout("small"), show_condition=True)
        hidden = renderer.build_sheet(sample_labels, resolve_layout("small"), show_condition=False)

        assert [cell.show_condition for cell in shown.rows[0]] == [True, True, False]
        assert not any(cell.show_condition for row in hidden.rows for cell in row)

    def test_empty_sheet(self):
        sheet = PrintSheetRenderer().build_sheet([], resolve_layout("medium"))

        assert sheet.row_count == 0
        assert sheet.label_count == 0
