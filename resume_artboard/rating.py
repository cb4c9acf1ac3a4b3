"""Discrete rating scale shared by skill and language sections."""

from __future__ import annotations

from ._constants import RATING_SCALE


def rating_cells(level: int) -> tuple[bool, ...]:
    """Return the filled state of each cell on the fixed five-cell scale.

    Cell ``i`` is filled when ``level > i``. The level is not range checked:
    anything above the scale fills every cell and anything at or below zero
    fills none.

    Examples
    --------
    >>> rating_cells(3)
    (True, True, True, False, False)
    >>> rating_cells(7)
    (True, True, True, True, True)
    """
    return tuple(level > index for index in range(RATING_SCALE))


__all__ = ["rating_cells"]
