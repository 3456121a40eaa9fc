"""Generic sequence helpers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def reorder_subarray(
    items: Sequence[T],
    start: int,
    end: int,
    transform: Callable[[list[T]], Sequence[T]],
) -> list[T]:
    """Replace ``items[start:end + 1]`` with ``transform`` applied to a copy of it.

    *end* is inclusive.  Everything outside the range is left untouched
    and a new list is always returned.  Bounds outside
    ``0 <= start <= end < len(items)`` are not an error: a warning is
    logged and the input comes back unchanged.
    """
    if start < 0 or end >= len(items) or start > end:
        logger.warning(
            "start:%d or end:%d invalid for length %d. Returning original sequence.",
            start,
            end,
            len(items),
        )
        return list(items)

    before = items[:start]
    after = items[end + 1 :]
    target = list(items[start : end + 1])
    return [*before, *transform(target), *after]
