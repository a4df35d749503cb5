"""Complete IPP message: header, attributes and trailing document data."""

import io
import logging
from dataclasses import dataclass, field
from typing import BinaryIO

from .attribute import Attribute, AttributeList
from .config import ParserConfig
from .constants import (
    ATTRIBUTES_CHARSET,
    ATTRIBUTES_NATURAL_LANGUAGE,
    PRINTER_URI,
    DelimiterTag,
    Operation,
    StatusCode,
)
from .header import IppHeader
from .parser import Parser
from .value import Charset, NaturalLanguage, Uri

logger = logging.getLogger(__name__)


@dataclass
class IppMessage:
    """IPP request or response."""

    header: IppHeader
    attributes: AttributeList = field(default_factory=AttributeList)
    payload: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.payload, str):  # type: ignore[unreachable]
            self.payload = self.payload.encode()  # type: ignore[unreachable]

    @classmethod
    def new_request(
        cls,
        operation: Operation,
        printer_uri: str,
        request_id: int = 1,
        charset: str = "utf-8",
        language: str = "en",
    ) -> "IppMessage":
        """Create a request with the mandatory operation attributes set."""
        attributes = AttributeList()
        group = DelimiterTag.OPERATION_ATTRIBUTES
        attributes.add(group, Attribute(ATTRIBUTES_CHARSET, Charset(charset)))
        attributes.add(group, Attribute(ATTRIBUTES_NATURAL_LANGUAGE, NaturalLanguage(language)))
        attributes.add(group, Attribute(PRINTER_URI, Uri(printer_uri)))
        return cls(header=IppHeader(operation_status=operation, request_id=request_id), attributes=attributes)

    @classmethod
    def new_response(
        cls, status: StatusCode, request_id: int, charset: str = "utf-8", language: str = "en"
    ) -> "IppMessage":
        """Create a response carrying charset and natural language."""
        attributes = AttributeList()
        group = DelimiterTag.OPERATION_ATTRIBUTES
        attributes.add(group, Attribute(ATTRIBUTES_CHARSET, Charset(charset)))
        attributes.add(group, Attribute(ATTRIBUTES_NATURAL_LANGUAGE, NaturalLanguage(language)))
        return cls(header=IppHeader(operation_status=status, request_id=request_id), attributes=attributes)

    def write(self, writer: BinaryIO) -> int:
        written = self.header.write(writer)
        written += self.attributes.write(writer)
        writer.write(self.payload)
        return written + len(self.payload)

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.write(buf)
        return buf.getvalue()

    @classmethod
    def from_reader(cls, reader: BinaryIO, config: ParserConfig | None = None) -> "IppMessage":
        """Parse a message; document data is read to EOF if configured."""
        config = config or ParserConfig()
        result = Parser(reader, config).parse()
        payload = reader.read() if config.capture_payload else b""
        logger.debug("IPP message %s with %d payload bytes", result.header, len(payload))
        return cls(header=result.header, attributes=result.attributes, payload=payload)

    @classmethod
    def from_bytes(cls, data: bytes, config: ParserConfig | None = None) -> "IppMessage":
        return cls.from_reader(io.BytesIO(data), config)
