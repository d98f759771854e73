"""
Big-endian byte-cursor primitives.

``Cursor`` walks a private snapshot of the input with an explicit position, so
decoding a long run of records never re-copies the unread tail and never keeps
a view on the caller's buffer. The ``take_*`` functions are one-shot wrappers
returning ``(value, remaining)`` with ``remaining`` as ``bytes``. A buffer
shorter than the read raises UnexpectedEndOfData and nothing is consumed.
"""

import struct
from typing import Tuple, Union

from .errors import UnexpectedEndOfData

Buffer = Union[bytes, bytearray, memoryview]

_FLOAT = struct.Struct(">f")
_I32 = struct.Struct(">i")
_U32 = struct.Struct(">I")


class Cursor:
    def __init__(self, buf: Buffer):
        # bytes(b) is b itself for bytes input; other buffers are copied once
        self.buf = bytes(buf)
        self.pos = 0

    @property
    def remaining(self) -> int:
        return len(self.buf) - self.pos

    def _require(self, n: int) -> None:
        if self.remaining < n:
            raise UnexpectedEndOfData(needed=n, available=self.remaining)

    def _unpack(self, fmt: struct.Struct):
        self._require(fmt.size)
        value = fmt.unpack_from(self.buf, self.pos)[0]
        self.pos += fmt.size
        return value

    def take_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"cannot take a negative number of bytes ({n})")
        self._require(n)
        out = self.buf[self.pos:self.pos + n]
        self.pos += n
        return out

    def skip(self, n: int) -> None:
        self.take_bytes(n)

    def take_float(self) -> float:
        return self._unpack(_FLOAT)

    def take_i32(self) -> int:
        return self._unpack(_I32)

    def take_u32(self) -> int:
        return self._unpack(_U32)

    def take_string(self) -> str:
        # XDR string: u32 length, data, zero padding to a 4-byte boundary
        start = self.pos
        length = self.take_u32()
        padded = (length + 3) & ~3
        if self.remaining < padded:
            self.pos = start
            raise UnexpectedEndOfData(needed=padded, available=self.remaining)
        raw = self.take_bytes(padded)
        return raw[:length].decode("utf-8", errors="replace")

    def rest(self) -> bytes:
        return self.buf[self.pos:]


def take_bytes(buf: Buffer, n: int) -> Tuple[bytes, bytes]:
    cur = Cursor(buf)
    return cur.take_bytes(n), cur.rest()


def take_float(buf: Buffer) -> Tuple[float, bytes]:
    cur = Cursor(buf)
    return cur.take_float(), cur.rest()


def take_i32(buf: Buffer) -> Tuple[int, bytes]:
    cur = Cursor(buf)
    return cur.take_i32(), cur.rest()


def take_u32(buf: Buffer) -> Tuple[int, bytes]:
    cur = Cursor(buf)
    return cur.take_u32(), cur.rest()


def take_string(buf: Buffer) -> Tuple[str, bytes]:
    cur = Cursor(buf)
    return cur.take_string(), cur.rest()
