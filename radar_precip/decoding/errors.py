from typing import Any, Dict, Optional, Tuple


class DecodeError(Exception):
    """Base exception for product decoding failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RangeViolation(DecodeError):
    """A decoded scalar lies outside its physically legal range."""

    def __init__(self, field: str, record_kind: str, value: Any, bounds: Tuple[Any, Any]) -> None:
        start, end = bounds
        message = f"{record_kind} {field} {value!r} outside legal range [{start}, {end}]"
        super().__init__(
            message,
            {"field": field, "record_kind": record_kind, "value": value, "bounds": (start, end)},
        )
        self.field = field
        self.record_kind = record_kind
        self.value = value
        self.bounds = (start, end)


class UnexpectedEndOfData(DecodeError):
    """The buffer ran out before a required field could be read."""

    def __init__(self, needed: int, available: int) -> None:
        message = f"Unexpected end of data: needed {needed} byte(s), {available} available"
        super().__init__(message, {"needed": needed, "available": available})
        self.needed = needed
        self.available = available
