"""Big-endian field helpers over binary file-like streams."""

import struct
from typing import BinaryIO

from .errors import IppEOFError, IppValueError


def read_exact(reader: BinaryIO, n: int) -> bytes:
    """Read exactly n bytes from a stream.

    Args:
        reader: Binary stream to read from
        n: Number of bytes to read

    Returns:
        Read bytes

    Raises:
        IppEOFError: If the stream ends before n bytes arrive
    """
    buf = bytearray()
    while len(buf) < n:
        chunk = reader.read(n - len(buf))
        if not chunk:
            raise IppEOFError(f"Unexpected end of stream: wanted {n} bytes, got {len(buf)}")
        buf.extend(chunk)
    return bytes(buf)


def read_u8(reader: BinaryIO) -> int:
    return read_exact(reader, 1)[0]


def read_u16(reader: BinaryIO) -> int:
    return struct.unpack(">H", read_exact(reader, 2))[0]


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8, raising IppValueError on malformed bytes."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise IppValueError(f"Invalid UTF-8 string: {data[:16]!r}") from exc


def read_string(reader: BinaryIO, n: int) -> str:
    """Read n bytes and decode them as UTF-8."""
    return decode_utf8(read_exact(reader, n))


def write_u8(writer: BinaryIO, value: int) -> int:
    writer.write(struct.pack(">B", value))
    return 1


def write_u16(writer: BinaryIO, value: int) -> int:
    writer.write(struct.pack(">H", value))
    return 2


def write_bytes(writer: BinaryIO, data: bytes) -> int:
    writer.write(data)
    return len(data)
