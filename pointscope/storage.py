"""In-memory table of measurement rows, one row per measurement point."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

_LOWEST = -sys.float_info.max
_HIGHEST = sys.float_info.max


class DataStorage:
    """Rows of floating point values with cached extremes.

    ``max_value`` and ``min_value`` stay at ``0.0`` until :meth:`find_max`
    and :meth:`find_min` have been called, and go back to ``0.0`` on
    :meth:`clear`.
    """

    def __init__(self) -> None:
        self._rows: list[list[float]] = []
        self.max_value = 0.0
        self.min_value = 0.0

    def clear(self) -> None:
        """Drop every row and reset the cached extremes."""
        self._rows.clear()
        self.max_value = 0.0
        self.min_value = 0.0

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row of values."""
        self._rows.append([float(value) for value in row])

    def row(self, index: int) -> list[float]:
        """Return a copy of the row at ``index``, or an empty list if out of range."""
        if 0 <= index < len(self._rows):
            return list(self._rows[index])
        return []

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[float]]:
        return (list(row) for row in self._rows)

    def find_max(self) -> float:
        """Compute, cache and return the largest value over all rows.

        With no values at all the result is the lowest finite float.
        """
        self.max_value = max(
            (value for row in self._rows for value in row), default=_LOWEST
        )
        return self.max_value

    def find_min(self) -> float:
        """Compute, cache and return the smallest of the per-row maxima.

        An empty row counts as having the lowest finite float as its maximum;
        with no rows the result is the largest finite float.
        """
        row_maxima = (max(row, default=_LOWEST) for row in self._rows)
        self.min_value = min(row_maxima, default=_HIGHEST)
        return self.min_value