"""
In-memory expiring store for print jobs.

Hands a submitted print job to a later, decoupled rendering step. Jobs live
only in this process: a restart discards them and other instances of the
service never see them.
"""

import random
import string
import threading
import time
from typing import Callable

from labelhub.config import settings
from labelhub.models.print_job import PrintJob
from labelhub.logger import get_logger

logger = get_logger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def epoch_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


class PrintJobStore:
    """
    Thread-safe map of job ID -> PrintJob with lazy expiry.

    A job is visible iff now < job.expires_at_epoch_ms. Reads evict expired
    entries in the same critical section that looks them up, so a read racing
    a sweep always sees either the live job or nothing.
    """

    ID_RANDOM_LENGTH = 11

    def __init__(
        self,
        ttl_ms: int | None = None,
        clock: Callable[[], int] = epoch_ms,
        sweep_on_put: bool | None = None
    ):
        self.ttl_ms = ttl_ms if ttl_ms is not None else settings.print_job_ttl_ms
        if self.ttl_ms <= 0:
            raise ValueError(f"Print job TTL must be positive, got {self.ttl_ms}ms")

        self.clock = clock
        self.sweep_on_put = settings.print_job_sweep_on_put if sweep_on_put is None else sweep_on_put

        self._jobs: dict[str, PrintJob] = {}
        self._lock = threading.Lock()
        self._closed = False

    def new_expiry(self) -> int:
        """Expiry timestamp for a job created now."""
        return self.clock() + self.ttl_ms

    def put(self, job: PrintJob) -> str:
        """
        Store a print job under a fresh ID.

        Args:
            job: Job to store; its expiry must lie in the future

        Returns:
            Job ID for later retrieval

        Raises:
            RuntimeError: If the store has been shut down
            ValueError: If the job is already expired
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Print job store has been shut down")

            now = self.clock()
            if job.expires_at_epoch_ms <= now:
                raise ValueError("Print job expiry must be in the future")

            job_id = self._generate_id(now)
            while job_id in self._jobs:
                job_id = self._generate_id(now)

            self._jobs[job_id] = job

            removed = self._sweep_locked(now) if self.sweep_on_put else 0
            live_jobs = len(self._jobs)

        logger.debug("Print job stored", extra={
            "job_id": job_id,
            "label_count": len(job.labels),
            "expires_at": job.expires_at_epoch_ms,
            "swept": removed,
            "live_jobs": live_jobs
        })

        return job_id

    def get(self, job_id: str) -> PrintJob | None:
        """
        Fetch a live job, evicting it if it has expired.

        Args:
            job_id: Job ID returned by put()

        Returns:
            The stored PrintJob, or None if absent or expired
        """
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return None

            if self.clock() < job.expires_at_epoch_ms:
                return job

            del self._jobs[job_id]

        logger.info("Expired print job evicted on read", extra={"job_id": job_id})
        return None

    def delete(self, job_id: str) -> bool:
        """Remove a job explicitly. Returns True if it was present."""
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    def sweep(self) -> int:
        """
        Delete every job whose expiry has passed.

        Returns:
            Number of jobs removed
        """
        with self._lock:
            removed = self._sweep_locked(self.clock())

        if removed:
            logger.info("Swept expired print jobs", extra={"removed": removed})

        return removed

    def shutdown(self) -> None:
        """Drop all jobs and refuse further puts."""
        with self._lock:
            dropped = len(self._jobs)
            self._jobs.clear()
            self._closed = True

        logger.info("Print job store shut down", extra={"dropped_jobs": dropped})

    @property
    def is_closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        """Number of physically present entries, expired or not."""
        with self._lock:
            return len(self._jobs)

    def __contains__(self, job_id: object) -> bool:
        """True only for live (unexpired) jobs. Does not evict."""
        with self._lock:
            job = self._jobs.get(job_id)  # type: ignore[arg-type]
            return job is not None and self.clock() < job.expires_at_epoch_ms

    def _sweep_locked(self, now: int) -> int:
        expired = [
            job_id for job_id, job in self._jobs.items()
            if job.expires_at_epoch_ms <= now
        ]
        for job_id in expired:
            del self._jobs[job_id]
        return len(expired)

    def _generate_id(self, now: int) -> str:
        # Timestamp prefix plus random suffix; short-lived and non-sensitive
        suffix = "".join(random.choices(_BASE36_ALPHABET, k=self.ID_RANDOM_LENGTH))
        return _to_base36(now) + suffix
