from typing import NamedTuple, Union

from .errors import RangeViolation

Number = Union[int, float]


class Bounds(NamedTuple):
    """Closed numeric interval ``[start, end]``."""

    start: Number
    end: Number


def check_range_inclusive(bounds: Bounds, value: Number, field_name: str, record_name: str) -> None:
    """Raise RangeViolation unless ``bounds.start <= value <= bounds.end``.

    The comparison is exact; no tolerance is applied at either end.
    """
    if not (bounds.start <= value <= bounds.end):
        raise RangeViolation(field_name, record_name, value, bounds)
