"""Low-level binary reading and writing of DICOM data streams."""

from __future__ import annotations

import codecs
import struct
import sys
import zlib
from enum import Enum
from typing import BinaryIO, List, Optional, Tuple

__all__ = [
    "LIMIT_READ_UNTIL_EOF",
    "ByteOrder",
    "InsufficientBytesError",
    "Reader",
    "Writer",
]

LIMIT_READ_UNTIL_EOF = -9999
"""Reader limit meaning there is no hard limit: read until end of stream."""

_CHUNK_SIZE = 64 * 1024


class ByteOrder(Enum):
    """Byte order of binary values in a stream."""

    LITTLE = "<"
    BIG = ">"

    def pack(self, fmt: str, value) -> bytes:
        try:
            return struct.pack(self.value + fmt, value)
        except struct.error as err:
            raise ValueError(f"cannot encode {value!r} as {fmt!r}: {err}") from err

    def unpack(self, fmt: str, data: bytes):
        return struct.unpack(self.value + fmt, data)[0]


class InsufficientBytesError(EOFError):
    """Not enough bytes left until the current limit to complete the operation."""

    def __init__(self) -> None:
        super().__init__(
            "not enough bytes left until buffer limit to complete this operation"
        )


class _PrefixedStream:
    """A stream that yields some already-buffered bytes before the source."""

    def __init__(self, prefix: bytes, source: BinaryIO) -> None:
        self._prefix = prefix
        self._source = source

    def read(self, size: int) -> bytes:
        if self._prefix:
            out, self._prefix = self._prefix[:size], self._prefix[size:]
            return out
        return self._source.read(size)


class _InflateStream:
    """Decompresses raw deflate data read from a source stream."""

    def __init__(self, source) -> None:
        self._source = source
        self._decompressor = zlib.decompressobj(-zlib.MAX_WBITS)
        self._buffer = bytearray()
        self._done = False

    def read(self, size: int) -> bytes:
        while len(self._buffer) < size and not self._done:
            chunk = self._source.read(_CHUNK_SIZE)
            if not chunk:
                self._buffer += self._decompressor.flush()
                self._done = True
                break
            self._buffer += self._decompressor.decompress(chunk)
            if self._decompressor.eof:
                self._done = True
        out = bytes(self._buffer[:size])
        del self._buffer[:size]
        return out


class Reader:
    """Reads binary DICOM values from a stream, honouring nested byte limits."""

    def __init__(
        self,
        stream: BinaryIO,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        limit: int = LIMIT_READ_UNTIL_EOF,
    ) -> None:
        self._stream = stream
        self._pending = b""
        self.byte_order = byte_order
        self.implicit = False
        self.limit = limit
        self.bytes_read = 0
        self._limit_stack: List[int] = []
        self._encoding: Optional[str] = None

    def _raw_read(self, size: int) -> bytes:
        if self._pending:
            out, self._pending = self._pending[:size], self._pending[size:]
            if len(out) < size:
                out += self._stream.read(size - len(out)) or b""
            return out
        return self._stream.read(size) or b""

    def bytes_left(self) -> int:
        """Bytes left until the current limit (sys.maxsize if unlimited)."""
        if self.limit == LIMIT_READ_UNTIL_EOF:
            return sys.maxsize
        return self.limit - self.bytes_read

    def read(self, size: int) -> bytes:
        """Read up to size bytes, never past the current limit.

        Returns b"" at the limit or at the end of the stream.
        """
        left = self.bytes_left()
        if left <= 0 or size <= 0:
            return b""
        data = self._raw_read(min(size, left))
        self.bytes_read += len(data)
        return data

    def _read_exact(self, size: int) -> bytes:
        data = bytearray()
        while len(data) < size:
            chunk = self.read(size - len(data))
            if not chunk:
                raise EOFError(f"wanted {size} bytes, got {len(data)}")
            data += chunk
        return bytes(data)

    def _read_value(self, fmt: str):
        return self.byte_order.unpack(fmt, self._read_exact(struct.calcsize(fmt)))

    def read_uint8(self) -> int:
        return self._read_value("B")

    def read_uint16(self) -> int:
        return self._read_value("H")

    def read_uint32(self) -> int:
        return self._read_value("I")

    def read_int16(self) -> int:
        return self._read_value("h")

    def read_int32(self) -> int:
        return self._read_value("i")

    def read_float32(self) -> float:
        return self._read_value("f")

    def read_float64(self) -> float:
        return self._read_value("d")

    def read_string(self, n: int) -> str:
        """Read n bytes and decode them with the current coding system."""
        data = self._read_exact(n)
        if not data:
            return ""
        if self._encoding is None:
            return data.decode("utf-8", errors="surrogateescape")
        return data.decode(self._encoding)

    def skip(self, n: int) -> None:
        """Advance by n bytes."""
        if self.bytes_left() < n:
            raise InsufficientBytesError()
        remaining = n
        while remaining > 0:
            chunk = self.read(min(remaining, _CHUNK_SIZE))
            if not chunk:
                raise EOFError(f"stream ended {remaining} bytes before skip target")
            remaining -= len(chunk)

    def push_limit(self, n: int) -> None:
        """Set a new limit n bytes from the current position."""
        new_limit = self.bytes_read + n
        if self.limit != LIMIT_READ_UNTIL_EOF and new_limit > self.limit:
            raise ValueError(
                "new limit exceeds current limit of buffer, "
                f"new limit: {new_limit}, limit: {self.limit}"
            )
        self._limit_stack.append(self.limit)
        self.limit = new_limit

    def pop_limit(self) -> None:
        """Skip what is left of the current limit and restore the previous one."""
        if not self._limit_stack:
            raise IndexError("no pushed limit to pop")
        if self.limit != LIMIT_READ_UNTIL_EOF and self.bytes_read < self.limit:
            try:
                self.skip(self.limit - self.bytes_read)
            except EOFError:
                pass
        self.limit = self._limit_stack.pop()

    def is_limit_exhausted(self) -> bool:
        return self.limit != LIMIT_READ_UNTIL_EOF and self.bytes_left() <= 0

    def set_transfer_syntax(self, byte_order: ByteOrder, implicit: bool) -> None:
        self.byte_order = byte_order
        self.implicit = implicit

    def set_deflate(self) -> None:
        """Inflate all further reads; the limit becomes read-until-EOF."""
        source = _PrefixedStream(self._pending, self._stream)
        self._pending = b""
        self._stream = _InflateStream(source)
        self.limit = LIMIT_READ_UNTIL_EOF

    def set_coding_system(self, encoding: Optional[str]) -> None:
        """Set the codec used by read_string (None for plain bytes as UTF-8)."""
        if encoding is not None:
            codecs.lookup(encoding)
        self._encoding = encoding

    def peek(self, n: int) -> bytes:
        """Return the next n bytes without advancing."""
        if len(self._pending) < n:
            more = self._stream.read(n - len(self._pending)) or b""
            self._pending += more
        if len(self._pending) < n:
            raise EOFError(f"only {len(self._pending)} of {n} bytes available")
        return self._pending[:n]


class Writer:
    """Writes binary DICOM values to a stream."""

    def __init__(
        self,
        out: BinaryIO,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        implicit: bool = False,
    ) -> None:
        self._out = out
        self.byte_order = byte_order
        self.implicit = implicit

    @property
    def transfer_syntax(self) -> Tuple[ByteOrder, bool]:
        return self.byte_order, self.implicit

    def set_transfer_syntax(self, byte_order: ByteOrder, implicit: bool) -> None:
        self.byte_order = byte_order
        self.implicit = implicit

    def write_zeros(self, n: int) -> None:
        self._out.write(bytes(n))

    def write_string(self, value: str) -> None:
        self._out.write(value.encode("utf-8", errors="surrogateescape"))

    def write_byte(self, value: int) -> None:
        self._out.write(self.byte_order.pack("B", value))

    def write_bytes(self, value: bytes) -> None:
        self._out.write(bytes(value))

    def write_uint16(self, value: int) -> None:
        self._out.write(self.byte_order.pack("H", value))

    def write_uint32(self, value: int) -> None:
        self._out.write(self.byte_order.pack("I", value))

    def write_float32(self, value: float) -> None:
        self._out.write(self.byte_order.pack("f", value))

    def write_float64(self, value: float) -> None:
        self._out.write(self.byte_order.pack("d", value))