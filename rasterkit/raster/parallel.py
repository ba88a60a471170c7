"""
Parallel Rasterizer
===================

Fans per-column work out over a fixed pool of threads.

Every column index of ``range(width)`` is put on a shared queue once; each
worker repeatedly claims the next index and calls ``per_column(index)`` until
the queue is empty. :meth:`ParallelRasterizer.render` blocks until all workers
have returned.

Failures
--------
The first exception raised by a column job is stored once (first error wins).
From then on workers stop claiming new columns, jobs already running finish,
and after the barrier the stored failure is raised as
:class:`~rasterkit.errors.WorkerFailureError` chained to the original
exception. Later failures are logged and dropped.
"""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Tuple

from ..config import default_worker_count
from ..errors import WorkerFailureError
from ..utils.default import value_or_factory

logger = logging.getLogger(__name__)

ColumnJob = Callable[[int], None]


class _FailureSlot:
    """Holds the first failure reported by any worker."""

    __slots__ = ("_lock", "_failure")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._failure: Optional[Tuple[int, BaseException]] = None

    @property
    def is_set(self) -> bool:
        return self._failure is not None

    def record(self, column: int, exc: BaseException) -> bool:
        with self._lock:
            if self._failure is None:
                self._failure = (column, exc)
                return True
        return False

    def raise_if_set(self) -> None:
        if self._failure is not None:
            column, exc = self._failure
            raise WorkerFailureError(column, exc) from exc


class ParallelRasterizer:
    """
    Column-partitioned executor.

    Args:
        workers: Pool size. Defaults to :func:`rasterkit.config.default_worker_count`
            (twice the CPU count unless ``RASTERKIT_WORKERS`` is set).
    """

    def __init__(self, workers: Optional[int] = None) -> None:
        workers = value_or_factory(workers, default_worker_count)
        if workers <= 0:
            raise ValueError(f"workers must be > 0, got {workers}")
        self._workers = workers

    @property
    def workers(self) -> int:
        return self._workers

    def render(self, width: int, per_column: ColumnJob) -> None:
        """
        Run ``per_column`` once for every column in ``range(width)``.

        Returns only after every claimed column has finished.

        Raises:
            ValueError: If ``width`` is negative.
            WorkerFailureError: If any column job raised.
        """
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if width == 0:
            return
        if self._workers == 1:
            self.render_serial(width, per_column)
            return

        jobs: "queue.SimpleQueue[int]" = queue.SimpleQueue()
        for x in range(width):
            jobs.put(x)

        failure = _FailureSlot()
        pool_size = min(self._workers, width)
        logger.debug("rendering %d columns on %d workers", width, pool_size)

        with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="rasterkit") as pool:
            futures: List[Future[None]] = [
                pool.submit(self._drain, jobs, per_column, failure) for _ in range(pool_size)
            ]
            wait(futures)

        failure.raise_if_set()
        # surfaces anything _drain does not catch (KeyboardInterrupt, SystemExit)
        for future in futures:
            future.result()

    def render_serial(self, width: int, per_column: ColumnJob) -> None:
        """Run every column in order on the calling thread, with the same failure contract."""
        for x in range(width):
            try:
                per_column(x)
            except Exception as exc:
                logger.error("column %d failed", x, exc_info=exc)
                raise WorkerFailureError(x, exc) from exc

    @staticmethod
    def _drain(jobs: "queue.SimpleQueue[int]", per_column: ColumnJob, failure: _FailureSlot) -> None:
        while not failure.is_set:
            try:
                x = jobs.get_nowait()
            except queue.Empty:
                return
            try:
                per_column(x)
            except Exception as exc:
                if failure.record(x, exc):
                    logger.error("column %d failed", x, exc_info=exc)
                else:
                    logger.warning("column %d failed after an earlier failure, discarding: %r", x, exc)

    def __repr__(self) -> str:
        return f"ParallelRasterizer(workers={self._workers})"
