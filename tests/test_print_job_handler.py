"""
Tests for the print job lifecycle (submit, retrieve, render).
"""

from urllib.parse import quote

import pytest

from labelhub.exceptions import NotFoundError, ValidationError
from labelhub.handlers.print_job_handler import PrintJobHandler
from labelhub.label_generation import resolve_layout

BASE_URL = "https://labels.example.com"
TTL_MS = 30 * 60 * 1000


@pytest.fixture
def handler(store):
    return PrintJobHandler(store, base_url=BASE_URL + "/")


class TestSubmit:
    """Tests for creating print jobs."""

    def test_submit_returns_retrieval_handle(self, handler, store, fake_clock, sample_labels):
        handle = handler.submit(sample_labels, "large")

        assert handle.retrieval_url == f"{BASE_URL}/print/{handle.job_id}"
        assert handle.expires_at_epoch_ms == fake_clock() + TTL_MS
        assert handle.job_id in store

    def test_flags_default_to_true(self, handler, sample_labels):
        handle = handler.submit(sample_labels, "small", show_price=None, show_condition=None)

        job, _layout = handler.retrieve(handle.job_id)

        assert job.show_price is True
        assert job.show_condition is True

    def test_flags_are_kept(self, handler, sample_labels):
        handle = handler.submit(sample_labels, "small", show_price=False, show_condition=False)

        job, _layout = handler.retrieve(handle.job_id)

        assert job.show_price is False
        assert job.show_condition is False

    @pytest.mark.parametrize("labels", [[], None])
    def test_empty_labels_rejected_without_store_mutation(self, handler, store, labels):
        with pytest.raises(ValidationError):
            handler.submit(labels, "medium")

        assert len(store) == 0

    def test_no_batch_limit(self, handler, sample_labels):
        labels = sample_labels * 100

        handle = handler.submit(labels, "small")
        job, _layout = handler.retrieve(handle.job_id)

        assert len(job.labels) == 300

    def test_missing_size_stores_default(self, handler, sample_labels):
        handle = handler.submit(sample_labels, None)

        job, layout = handler.retrieve(handle.job_id)

        assert job.label_size == "medium"
        assert layout == resolve_layout("medium")


class TestRetrieve:
    """Tests for fetching print jobs."""

    def test_retrieve_returns_job_and_layout(self, handler, sample_labels):
        handle = handler.submit(sample_labels, "dymo5xl")

        job, layout = handler.retrieve(handle.job_id)

        assert list(job.labels) == sample_labels
        assert job.label_size == "dymo5xl"
        assert layout.grid_cols == 4

    def test_unknown_size_kept_raw_and_rendered_as_medium(self, handler, sample_labels):
        handle = handler.submit(sample_labels, "bogus")

        job, layout = handler.retrieve(handle.job_id)

        assert job.label_size == "bogus"
        assert layout == resolve_layout("medium")

    def test_expired_job_not_found_and_evicted(self, handler, store, fake_clock, sample_labels):
        handle = handler.submit(sample_labels, "large")
        fake_clock.advance(TTL_MS + 1)

        with pytest.raises(NotFoundError) as exc_info:
            handler.retrieve(handle.job_id)

        assert exc_info.value.message == "Print job not found or expired"
        assert len(store) == 0

    def test_unknown_job(self, handler):
        with pytest.raises(NotFoundError):
            handler.retrieve("nope")


class TestRender:
    """Tests for laying out stored and inline jobs."""

    def test_three_large_labels_render_in_two_rows(self, handler, sample_labels):
        handle = handler.submit(sample_labels, "large")

        sheet = handler.render(handle.job_id)

        assert sheet.layout.grid_cols == 2
        assert sheet.row_count == 2
        assert [len(row) for row in sheet.rows] == [2, 1]
        assert sheet.label_count == 3

    def test_render_does_not_truncate_to_grid(self, handler, sample_labels):
        handle = handler.submit(sample_labels * 12, "dymo5xl")  # 36 labels, 4x4 hint

        sheet = handler.render(handle.job_id)

        assert sheet.label_count == 36
        assert sheet.row_count == 9

    def test_render_expired(self, handler, fake_clock, sample_labels):
        handle = handler.submit(sample_labels, "large")
        fake_clock.advance(TTL_MS)

        with pytest.raises(NotFoundError):
            handler.render(handle.job_id)

    def test_render_direct(self, handler):
        data = handler.parse_print_data(
            '{"labels": [{"title": "A", "identifier": "X-1", "price": "$1"}], "labelSize": "small"}'
        )

        sheet = handler.render_direct(data)

        assert sheet.layout.label_size.value == "small"
        assert sheet.label_count == 1


class TestParsePrintData:
    """Tests for direct print link payloads."""

    def test_plain_json(self):
        data = PrintJobHandler.parse_print_data(
            '{"labels": [{"title": "A", "identifier": "X", "price": "$1"}], '
            '"labelSize": "large", "showPrice": false}'
        )

        assert data.label_size == "large"
        assert data.show_price is False
        assert data.show_condition is True

    def test_percent_encoded_json(self):
        raw = quote('{"labels": [{"title": "A", "identifier": "X", "price": "$1"}]}')

        data = PrintJobHandler.parse_print_data(raw)

        assert data.labels[0].identifier == "X"
        assert data.label_size == "medium"

    @pytest.mark.parametrize("raw", [None, "", "not json", '{"labels": "nope"}'])
    def test_invalid_payload(self, raw):
        with pytest.raises(ValidationError):
            PrintJobHandler.parse_print_data(raw)
