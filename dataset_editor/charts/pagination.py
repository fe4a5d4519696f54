from __future__ import annotations

import math
from dataclasses import dataclass

from dataset_editor.core.exceptions import InvalidPageRangeError

# Series at or below this many categories fit without page controls
PAGINATION_THRESHOLD = 5


@dataclass(frozen=True)
class PageWindow:
    """A zero-based slice [start, start + size) over an aggregated series."""
    start: int
    size: int

    @property
    def end(self) -> int:
        return self.start + self.size


def needs_pagination(total_count: int) -> bool:
    return total_count > PAGINATION_THRESHOLD


def total_pages(total_count: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total_count / page_size)


def clamp_page(page: int, total: int) -> int:
    """Keep a 1-based page number within [1, total] (1 when there are no pages)."""
    return min(max(page, 1), max(total, 1))


def page_start(page: int, page_size: int) -> int:
    """Zero-based offset of a 1-based page number."""
    return (max(page, 1) - 1) * page_size


def window_for_page(page: int, page_size: int, total_count: int) -> PageWindow:
    page = clamp_page(page, total_pages(total_count, page_size))
    return PageWindow(start=page_start(page, page_size), size=page_size)


def window_for_range(start: int, end: int, total_count: int) -> PageWindow:
    """
    Window for a custom, 1-based, inclusive item range (e.g. items 11-15).

    Raises:
        InvalidPageRangeError: if start is outside [1, total_count] or
            end is outside [start, total_count]
    """
    if start < 1 or start > total_count:
        raise InvalidPageRangeError(f"Start must be between 1 and {total_count}")
    if end < start or end > total_count:
        raise InvalidPageRangeError(f"End must be between {start} and {total_count}")

    return PageWindow(start=start - 1, size=end - start + 1)


def range_label(start: int, page_size: int, total_count: int) -> str:
    """Caption such as "Showing 11-20 of 25 items"."""
    if total_count == 0:
        return "Showing 0 of 0 items"
    first = start + 1
    last = min(start + page_size, total_count)
    return f"Showing {first}-{last} of {total_count} items"
