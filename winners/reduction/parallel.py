"""Partitioned drivers: accumulate partitions concurrently, then combine."""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Optional, TypeVar

from winners.collector.collector import ReductionOperation
from winners.reduction.partition import partition
from winners.reduction.sequential import CombineStrategy, reduce_states
from winners.settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


def parallel_collect(
    elements: Iterable[T],
    operation: ReductionOperation[T, A, R],
    chunk_size: Optional[int] = None,
    max_workers: Optional[int] = None,
    strategy: Optional[CombineStrategy] = None,
) -> R:
    """
    Reduce elements on a thread pool.

    Each partition is accumulated by its own task into a private state.
    When the operation is UNORDERED, partial states are combined in
    completion order; otherwise in partition order.

    Args:
        elements: Input elements
        operation: Reduction to run
        chunk_size: Elements per partition (defaults to settings.chunk_size)
        max_workers: Thread pool size (defaults to settings.max_workers)
        strategy: "tree" or "pairwise" (defaults to settings.combine_strategy)

    Returns:
        Finished result of the reduction
    """
    if chunk_size is None:
        chunk_size = settings.chunk_size
    if max_workers is None:
        max_workers = settings.max_workers
    strategy = strategy or settings.combine_strategy

    chunks = list(partition(elements, chunk_size))
    logger.info(
        "Reducing %d partitions (chunk_size=%d, strategy=%s)",
        len(chunks),
        chunk_size,
        strategy,
    )

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(operation.fold, chunk) for chunk in chunks]
        if operation.unordered:
            states = [future.result() for future in as_completed(futures)]
        else:
            states = [future.result() for future in futures]

    return operation.finisher(reduce_states(states, operation, strategy))


async def async_collect(
    elements: Iterable[T],
    operation: ReductionOperation[T, A, R],
    chunk_size: Optional[int] = None,
    strategy: Optional[CombineStrategy] = None,
) -> R:
    """
    Reduce elements from within an event loop.

    Partitions are accumulated in worker threads and gathered concurrently;
    partial states are combined in partition order.

    Args:
        elements: Input elements
        operation: Reduction to run
        chunk_size: Elements per partition (defaults to settings.chunk_size)
        strategy: "tree" or "pairwise" (defaults to settings.combine_strategy)

    Returns:
        Finished result of the reduction
    """
    if chunk_size is None:
        chunk_size = settings.chunk_size
    strategy = strategy or settings.combine_strategy

    tasks = [
        asyncio.to_thread(operation.fold, chunk)
        for chunk in partition(elements, chunk_size)
    ]
    states = await asyncio.gather(*tasks)
    logger.info("Gathered %d partial accumulators", len(states))

    return operation.finisher(reduce_states(states, operation, strategy))
