"""Exceptions for Rate Winners."""


class WinnersError(Exception):
    """Base exception for winners collection errors."""

    pass


class StateConsumedError(WinnersError):
    """Raised when an accumulator is used after being combined into another."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: accumulator was consumed by combine")


class StateFinishedError(WinnersError):
    """Raised when an accumulator is mutated after finish."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: accumulator is already finished")


class InvalidPartitionError(WinnersError):
    """Raised when elements cannot be split with the requested chunk size."""

    def __init__(self, chunk_size: int):
        self.chunk_size = chunk_size
        super().__init__(f"Chunk size must be positive, got {chunk_size}")
