"""Column-wise fan-out for distance matrices.

Each column of a distance matrix depends on one element of ``b`` and on
the whole of ``a``, so columns are independent. They are grouped into
chunks of consecutive columns, one task per chunk, so the row vector is
shipped once per chunk rather than once per column. Chunks are submitted
to a ``concurrent.futures`` executor and collected by their first column
index, so the assembled matrix never depends on worker count, chunk size
or completion order.

A failure in any chunk cancels the chunks that have not started yet and
surfaces as a single :class:`~fuzzydist.exceptions.WorkerError`.
"""

import logging
import math
from concurrent.futures import Executor, Future, ProcessPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

from fuzzydist.dispatch import DistanceParams, compute
from fuzzydist.exceptions import ValidationError, WorkerError

logger = logging.getLogger(__name__)

Encoded = Optional[Sequence[int]]
Column = List[Optional[float]]

# Chunks per worker on an owned pool
CHUNKS_PER_WORKER = 4


def validate_workers(workers: int) -> int:
    """Check that the worker count is a positive integer."""
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise ValidationError(f"workers must be a positive integer, got {workers!r}")
    return workers


def _chunks(seq: Sequence[Encoded], size: int) -> List[Sequence[Encoded]]:
    return [seq[i : i + size] for i in range(0, len(seq), size)]


def compute_column(
    column: Encoded, rows: Sequence[Encoded], params: DistanceParams
) -> Column:
    """Distances from every row sequence to one column sequence."""
    return [compute(row, column, params) for row in rows]


def compute_columns(
    columns: Sequence[Encoded], rows: Sequence[Encoded], params: DistanceParams
) -> List[Column]:
    """Compute a block of consecutive columns."""
    return [compute_column(col, rows, params) for col in columns]


def _collect(
    executor: Executor,
    rows: Sequence[Encoded],
    columns: Sequence[Encoded],
    params: DistanceParams,
    chunk_size: int,
) -> List[Column]:
    futures: Dict[Future, int] = {}
    results: List[Optional[Column]] = [None] * len(columns)
    try:
        for k, block in enumerate(_chunks(columns, chunk_size)):
            futures[executor.submit(compute_columns, block, rows, params)] = k * chunk_size
        for fut in as_completed(futures):
            start = futures[fut]
            block_result = fut.result()
            results[start : start + len(block_result)] = block_result
    except Exception as exc:
        for pending in futures:
            pending.cancel()
        raise WorkerError(f"Distance matrix computation failed: {exc}") from exc
    except BaseException:
        for pending in futures:
            pending.cancel()
        raise
    return results  # type: ignore[return-value]


def map_columns(
    rows: Sequence[Encoded],
    columns: Sequence[Encoded],
    params: DistanceParams,
    workers: int = 1,
    executor: Optional[Executor] = None,
    chunk_size: Optional[int] = None,
) -> List[Column]:
    """Compute one result column per element of ``columns``.

    Args:
        rows: Encoded sequences making up each column (the ``a`` vector).
        columns: Encoded sequences, one per column (the ``b`` vector).
        params: Validated distance parameters.
        workers: Number of worker processes. 1 computes in the calling
            thread. Ignored when ``executor`` is given.
        executor: Caller-owned executor to submit columns to. It is not
            shut down afterwards.
        chunk_size: Number of consecutive columns per task. Defaults to
            one column per task on a caller executor, and to
            ``CHUNKS_PER_WORKER`` chunks per worker on an owned pool.

    Returns:
        List of columns, ``result[j][i]`` being the distance for
        ``(rows[i], columns[j])``.

    Raises:
        ValidationError: If ``workers`` or ``chunk_size`` is less than 1.
        WorkerError: If computing any column fails.
    """
    validate_workers(workers)
    if chunk_size is not None and (
        isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1
    ):
        raise ValidationError(f"chunk_size must be a positive integer, got {chunk_size!r}")
    columns = list(columns)

    if executor is not None:
        size = chunk_size or 1
        logger.debug("Submitting %d columns to caller executor in chunks of %d", len(columns), size)
        return _collect(executor, rows, columns, params, size)

    if workers == 1 or len(columns) <= 1:
        return compute_columns(columns, rows, params)

    n_workers = min(workers, len(columns))
    size = chunk_size or max(1, math.ceil(len(columns) / (n_workers * CHUNKS_PER_WORKER)))
    logger.debug(
        "Computing %d columns on %d worker processes in chunks of %d",
        len(columns),
        n_workers,
        size,
    )
    pool = ProcessPoolExecutor(max_workers=n_workers)
    try:
        result = _collect(pool, rows, columns, params, size)
    except BaseException:
        pool.shutdown(wait=False, cancel_futures=True)
        raise
    pool.shutdown(wait=True)
    logger.debug("Finished %d columns", len(columns))
    return result


__all__ = ["compute_column", "compute_columns", "map_columns", "validate_workers"]
