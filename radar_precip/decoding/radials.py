from typing import ClassVar, List, Tuple

from pydantic import BaseModel, ConfigDict

from .cursor import Buffer, Cursor
from .units import Angle, Velocity
from .validation import Bounds, check_range_inclusive
from ..utils.logging import get_logger

logger = get_logger(__name__)

RADIAL_ARRAY_NAME = "radial array"
RADIAL_COUNT_RANGE = Bounds(0, 2**31 - 1)

# Each bin occupies a 4-byte slot; the rate is the trailing big-endian u16
BIN_SLOT_SIZE = 4
RATE_SCALE = 1000.0


class Radial(BaseModel):
    """Precipitation rates measured along one bearing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    NAME: ClassVar[str] = "radial"
    AZIMUTH_RANGE: ClassVar[Bounds] = Bounds(0.0, 360.0)
    ELEVATION_RANGE: ClassVar[Bounds] = Bounds(-1.0, 45.0)
    WIDTH_RANGE: ClassVar[Bounds] = Bounds(0.0, 2.0)
    NUM_BINS_RANGE: ClassVar[Bounds] = Bounds(0, 1840)

    # Bearing along which this radial points
    azimuth: Angle
    # Beam tilt above horizontal
    elevation: Angle
    # Angular size of this radial
    width: Angle
    # One rate per bin, ascending distance from the radar
    precip_rates: Tuple[Velocity, ...] = ()


def read_radial(cur: Cursor) -> Radial:
    """Decode one Radial Information Data Structure at the cursor position.

    Raises RangeViolation for an out-of-range header field and
    UnexpectedEndOfData for a short buffer; no field is read past a failing
    check.
    """
    azimuth = cur.take_float()
    check_range_inclusive(Radial.AZIMUTH_RANGE, azimuth, "azimuth", Radial.NAME)

    elevation = cur.take_float()
    check_range_inclusive(Radial.ELEVATION_RANGE, elevation, "elevation", Radial.NAME)

    width = cur.take_float()
    check_range_inclusive(Radial.WIDTH_RANGE, width, "width", Radial.NAME)

    num_bins = cur.take_i32()
    check_range_inclusive(Radial.NUM_BINS_RANGE, num_bins, "num bins", Radial.NAME)

    cur.take_string()  # attributes
    cur.skip(4)
    rate_bytes = cur.take_bytes(num_bins * BIN_SLOT_SIZE)

    precip_rates = []
    for idx in range(num_bins):
        offset = idx * BIN_SLOT_SIZE
        raw = int.from_bytes(rate_bytes[offset + 2:offset + 4], "big")
        precip_rates.append(Velocity.from_inches_per_hour(raw / RATE_SCALE))

    return Radial(
        azimuth=Angle.from_degrees(azimuth),
        elevation=Angle.from_degrees(elevation),
        width=Angle.from_degrees(width),
        precip_rates=tuple(precip_rates),
    )


def radial(data: Buffer) -> Tuple[Radial, bytes]:
    """Decode one radial from the head of ``data``; returns it and the bytes after it."""
    cur = Cursor(data)
    r = read_radial(cur)
    return r, cur.rest()


def radials(data: Buffer) -> Tuple[List[Radial], bytes]:
    """Decode an i32 radial count followed by that many radials."""
    cur = Cursor(data)
    count = cur.take_i32()
    check_range_inclusive(RADIAL_COUNT_RANGE, count, "num radials", RADIAL_ARRAY_NAME)

    out: List[Radial] = [read_radial(cur) for _ in range(count)]

    logger.debug(f"Decoded {len(out)} radials ({cur.remaining} bytes remaining)")
    return out, cur.rest()
