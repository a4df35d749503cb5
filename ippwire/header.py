"""IPP message header (version, operation or status code, request id)."""

import struct
from dataclasses import dataclass
from typing import BinaryIO

from .constants import IPP_VERSION
from .stream import read_exact, write_bytes

_HEADER_FORMAT = ">BBHI"
HEADER_SIZE = struct.calcsize(_HEADER_FORMAT)


@dataclass
class IppHeader:
    """Fixed 8-byte header that precedes the attribute stream.

    ``operation_status`` holds the operation id in a request and the status
    code in a response.
    """

    operation_status: int = 0
    request_id: int = 1
    version: tuple[int, int] = IPP_VERSION

    def to_bytes(self) -> bytes:
        """Convert header to its wire bytes."""
        major, minor = self.version
        return struct.pack(_HEADER_FORMAT, major, minor, self.operation_status, self.request_id)

    def write(self, writer: BinaryIO) -> int:
        return write_bytes(writer, self.to_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> "IppHeader":
        """Create header from its wire bytes."""
        major, minor, operation_status, request_id = struct.unpack(_HEADER_FORMAT, data)
        return cls(operation_status=operation_status, request_id=request_id, version=(major, minor))

    @classmethod
    def from_reader(cls, reader: BinaryIO) -> "IppHeader":
        return cls.from_bytes(read_exact(reader, HEADER_SIZE))
