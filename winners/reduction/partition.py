"""Splitting input into partitions for independent accumulation."""
from itertools import islice
from typing import Iterable, Iterator, TypeVar

from winners.exceptions import InvalidPartitionError

T = TypeVar("T")


def partition(elements: Iterable[T], chunk_size: int) -> Iterator[list[T]]:
    """
    Split elements into consecutive non-empty chunks.

    Args:
        elements: Input elements
        chunk_size: Maximum elements per chunk

    Yields:
        Lists of at most chunk_size elements, in input order
    """
    if chunk_size <= 0:
        raise InvalidPartitionError(chunk_size)

    iterator = iter(elements)
    while True:
        chunk = list(islice(iterator, chunk_size))
        if not chunk:
            return
        yield chunk
