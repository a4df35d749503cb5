"""Tests for IppHeader, IppMessage and ParserConfig."""

import io

import pytest
from pydantic import ValidationError

from ippwire import (
    Attribute,
    Charset,
    DelimiterTag,
    IppEOFError,
    IppHeader,
    IppMessage,
    Keyword,
    ListOf,
    NaturalLanguage,
    Operation,
    ParserConfig,
    StatusCode,
    Uri,
)

OP = DelimiterTag.OPERATION_ATTRIBUTES


def test_header_bytes() -> None:
    """Test the fixed 8-byte header layout."""
    header = IppHeader(operation_status=Operation.GET_PRINTER_ATTRIBUTES, request_id=42)

    assert header.to_bytes() == b"\x01\x01\x00\x0b\x00\x00\x00\x2a"
    assert IppHeader.from_bytes(header.to_bytes()) == header

    v2 = IppHeader.from_reader(io.BytesIO(b"\x02\x00\x04\x00\x00\x00\x00\x01"))
    assert v2.version == (2, 0)
    assert v2.operation_status == StatusCode.CLIENT_ERROR_BAD_REQUEST
    assert v2.request_id == 1


def test_header_truncated() -> None:
    """Test that a short header raises an EOF error."""
    with pytest.raises(IppEOFError):
        IppHeader.from_reader(io.BytesIO(b"\x01\x01\x00"))


def test_new_request() -> None:
    """Test that requests carry the mandatory operation attributes."""
    message = IppMessage.new_request(Operation.GET_PRINTER_ATTRIBUTES, "ipp://localhost/printers/p1", request_id=9)

    assert message.header.operation_status == Operation.GET_PRINTER_ATTRIBUTES
    assert message.header.request_id == 9
    assert message.attributes.get(OP, "attributes-charset").value == Charset("utf-8")
    assert message.attributes.get(OP, "attributes-natural-language").value == NaturalLanguage("en")
    assert message.attributes.get(OP, "printer-uri").value == Uri("ipp://localhost/printers/p1")


def test_message_round_trip_with_payload() -> None:
    """Test header, attributes and document data through bytes and back."""
    message = IppMessage.new_request(Operation.PRINT_JOB, "ipp://x", request_id=3)
    message.attributes.add(
        OP, Attribute("requested-attributes", ListOf([Keyword("job-id"), Keyword("job-state")]))
    )
    message.payload = b"%PDF-1.7 ..."

    data = message.to_bytes()
    parsed = IppMessage.from_bytes(data)

    assert data.startswith(b"\x01\x01\x00\x02\x00\x00\x00\x03\x01")
    assert parsed.header == message.header
    assert parsed.attributes == message.attributes
    assert parsed.payload == b"%PDF-1.7 ..."
    print("✓ Message round trip with payload")


def test_message_without_payload_capture() -> None:
    """Test that document data is left in the stream when not captured."""
    message = IppMessage.new_response(StatusCode.SUCCESSFUL_OK, request_id=5)
    message.payload = b"document"
    reader = io.BytesIO(message.to_bytes())

    parsed = IppMessage.from_reader(reader, ParserConfig(capture_payload=False))

    assert parsed.header.operation_status == StatusCode.SUCCESSFUL_OK
    assert parsed.attributes.get(OP, "printer-uri") is None
    assert parsed.payload == b""
    assert reader.read() == b"document"


def test_message_write_count() -> None:
    """Test that write returns the full message length."""
    message = IppMessage.new_request(Operation.GET_JOBS, "ipp://x")
    message.payload = b"abc"
    buf = io.BytesIO()

    assert message.write(buf) == len(buf.getvalue())


def test_parser_config() -> None:
    """Test config defaults and validation."""
    config = ParserConfig()
    assert config.max_collection_depth == 16
    assert config.capture_payload is True

    with pytest.raises(ValidationError):
        ParserConfig(max_collection_depth=0)


if __name__ == "__main__":
    test_header_bytes()
    test_header_truncated()
    test_new_request()
    test_message_round_trip_with_payload()
    test_message_without_payload_capture()
    test_message_write_count()
    test_parser_config()
    print("All message tests passed!")
