"""Drivers that run a reduction sequentially or over partitions."""
from .parallel import async_collect, parallel_collect
from .partition import partition
from .sequential import collect, reduce_states

__all__ = ["async_collect", "collect", "parallel_collect", "partition", "reduce_states"]
