"""
Typed physical quantities produced by the decoder.

Values are kept in the unit they arrive in on the wire (degrees, inches per
hour) so constructing and reading back a quantity is exact; SI and metric
views are derived on access.
"""

from dataclasses import dataclass
import math

METERS_PER_INCH = 0.0254
SECONDS_PER_HOUR = 3600.0


@dataclass(frozen=True, order=True)
class Angle:
    deg: float

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(float(value))

    @property
    def degrees(self) -> float:
        return self.deg

    @property
    def radians(self) -> float:
        return math.radians(self.deg)


@dataclass(frozen=True, order=True)
class Velocity:
    """Velocity-dimensioned quantity; precipitation rates use inch-per-hour-equivalent."""

    in_per_hr: float

    @classmethod
    def from_inches_per_hour(cls, value: float) -> "Velocity":
        return cls(float(value))

    @property
    def inches_per_hour(self) -> float:
        return self.in_per_hr

    @property
    def millimeters_per_hour(self) -> float:
        return self.in_per_hr * METERS_PER_INCH * 1000.0

    @property
    def meters_per_second(self) -> float:
        return self.in_per_hr * METERS_PER_INCH / SECONDS_PER_HOUR
