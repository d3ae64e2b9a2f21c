"""Fixed-size batching of iterables."""

from typing import Any, Iterable, Iterator, List


def iter_batches(source: Iterable[Any], size: int) -> Iterator[List[Any]]:
    """Yield consecutive lists of ``size`` items; the last may be shorter.

    Each batch is yielded as soon as it is full. Never yields an empty list.
    """
    batch: List[Any] = []
    for item in source:
        batch.append(item)
        if len(batch) == size:
            yield batch
            batch = []

    if batch:
        yield batch
