import struct

import pytest


def _xdr_string(s: bytes) -> bytes:
    pad = (-len(s)) % 4
    return struct.pack(">I", len(s)) + s + b"\x00" * pad


def _radial_bytes(
    azimuth=90.0,
    elevation=10.0,
    width=0.5,
    rates=(),
    num_bins=None,
    attributes=b"",
    reserved=b"\x00\x00\x00\x00",
    lead=b"\x00\x00",
):
    if num_bins is None:
        num_bins = len(rates)
    buf = struct.pack(">fffi", azimuth, elevation, width, num_bins)
    buf += _xdr_string(attributes)
    buf += reserved
    for raw in rates:
        buf += lead + struct.pack(">H", raw)
    return buf


@pytest.fixture
def radial_bytes():
    """Factory building one encoded radial."""
    return _radial_bytes


@pytest.fixture
def radial_array_bytes():
    """Factory building an i32 count followed by encoded radials."""

    def build(*encoded: bytes, count=None) -> bytes:
        n = len(encoded) if count is None else count
        return struct.pack(">i", n) + b"".join(encoded)

    return build
