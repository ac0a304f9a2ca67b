# =============================================================================
# streams.py - Lazy stream helpers
# =============================================================================
#
# Every pipeline stage is a generator over the stage before it. DataStream
# adds one thing plain iterators lack: a running count of how many items
# have been pulled through it, so later stages can report *where* in the
# recording something happened without keeping the recording around.
# =============================================================================

from __future__ import annotations
from itertools import islice
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


class DataStream(Iterator[T]):
    """
    Single-pass iterator that counts consumed items.

    Usage:
        samples = DataStream(wav_samples)
        for s in samples: ...
        samples.position   # items pulled so far
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._it = iter(source)
        self.position = 0

    def __iter__(self) -> "DataStream[T]":
        return self

    def __next__(self) -> T:
        item = next(self._it)
        self.position += 1
        return item


def chunked(iterable: Iterable[T], size: int) -> Iterator[tuple[T, ...]]:
    """Yield consecutive tuples of ``size`` items; the last may be shorter."""
    if size <= 0:
        raise ValueError(f"size must be positive, got {size!r}")
    it = iter(iterable)
    while True:
        chunk = tuple(islice(it, size))
        if not chunk:
            return
        yield chunk


def take(iterable: Iterable[T], n: int) -> list[T]:
    """Pull at most ``n`` items off the front of ``iterable``."""
    return list(islice(iterable, n))


def skip_through(iterable: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """
    Discard items until one satisfies ``predicate`` and return it.

    The matching item is consumed too (itertools.takewhile semantics), so the
    next pull from ``iterable`` yields the item after it. Returns None if the
    stream ran dry first.
    """
    for item in iterable:
        if predicate(item):
            return item
    return None
