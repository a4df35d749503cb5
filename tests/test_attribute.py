"""Tests for Attribute and AttributeList serialization."""

import io
import struct

import pytest

from ippwire import (
    Attribute,
    AttributeList,
    Charset,
    DelimiterTag,
    Integer,
    IppValueError,
    Keyword,
    ListOf,
    NameWithoutLanguage,
    NaturalLanguage,
    OctetString,
    Uri,
)

OP = DelimiterTag.OPERATION_ATTRIBUTES
JOB = DelimiterTag.JOB_ATTRIBUTES
PRINTER = DelimiterTag.PRINTER_ATTRIBUTES


def _attr_bytes(attribute: Attribute) -> bytes:
    buf = io.BytesIO()
    attribute.write(buf)
    return buf.getvalue()


def test_attribute_write_layout() -> None:
    """Test tag, name length, name and value layout of one attribute."""
    attribute = Attribute("job-id", Integer(7))
    buf = io.BytesIO()

    written = attribute.write(buf)

    assert buf.getvalue() == b"\x21" + b"\x00\x06" + b"job-id" + b"\x00\x04" + b"\x00\x00\x00\x07"
    assert written == len(buf.getvalue()) == 15
    assert attribute.name == "job-id"
    assert attribute.value == Integer(7)


def test_attribute_write_array() -> None:
    """Test that extra values are written as zero-name records."""
    attribute = Attribute("sides-supported", ListOf([Keyword("one-sided"), Keyword("two-sided-long-edge")]))

    data = _attr_bytes(attribute)

    expected = (
        b"\x44"
        + struct.pack(">H", 15)
        + b"sides-supported"
        + struct.pack(">H", 9)
        + b"one-sided"
        + b"\x44\x00\x00"
        + struct.pack(">H", 19)
        + b"two-sided-long-edge"
    )
    assert data == expected


def test_oversized_name_writes_nothing() -> None:
    """Test that a name longer than 0xFFFF bytes fails before any output."""
    buf = io.BytesIO()

    with pytest.raises(IppValueError):
        Attribute("x" * 70000, Integer(1)).write(buf)

    assert buf.getvalue() == b""


def test_oversized_value_writes_nothing() -> None:
    """Test that an oversized value leaves no partial record behind."""
    buf = io.BytesIO(b"prefix")
    buf.seek(0, io.SEEK_END)

    with pytest.raises(IppValueError):
        Attribute("blob", OctetString(b"\x00" * 70000)).write(buf)

    assert buf.getvalue() == b"prefix"
    print("✓ Oversized value rejected")


def test_add_get_and_overwrite() -> None:
    """Test lookups and last-write-wins within a group."""
    attrs = AttributeList()
    attrs.add(PRINTER, Attribute("printer-name", NameWithoutLanguage("p1")))
    attrs.add(JOB, Attribute("printer-name", NameWithoutLanguage("other")))
    attrs.add(PRINTER, Attribute("printer-name", NameWithoutLanguage("p2")))

    assert attrs.get(PRINTER, "printer-name").value == NameWithoutLanguage("p2")
    assert attrs.get(JOB, "printer-name").value == NameWithoutLanguage("other")
    assert len(attrs.get_group(PRINTER)) == 1
    assert attrs.get_printer_attributes() is attrs.get_group(PRINTER)

    # absent group or name is "not found", not an error
    assert attrs.get(OP, "printer-name") is None
    assert attrs.get(PRINTER, "missing") is None
    assert attrs.get_group(OP) is None
    assert attrs.get_operation_attributes() is None


def test_empty_list_write() -> None:
    """Test that an empty list still opens the operation group."""
    attrs = AttributeList()
    buf = io.BytesIO()

    written = attrs.write(buf)

    assert buf.getvalue() == b"\x01\x03"
    assert written == 2


def test_header_attributes_written_first() -> None:
    """Test fixed charset, natural-language, printer-uri ordering."""
    charset = Attribute("attributes-charset", Charset("utf-8"))
    language = Attribute("attributes-natural-language", NaturalLanguage("en"))
    uri = Attribute("printer-uri", Uri("ipp://localhost/printers/p1"))
    user = Attribute("requesting-user-name", NameWithoutLanguage("alice"))

    attrs = AttributeList()
    attrs.add(OP, user)
    attrs.add(OP, charset)
    attrs.add(OP, uri)
    attrs.add(OP, language)

    expected = (
        b"\x01"
        + _attr_bytes(charset)
        + _attr_bytes(language)
        + _attr_bytes(uri)
        + _attr_bytes(user)
        + b"\x03"
    )
    assert attrs.to_bytes() == expected
    print("✓ Header attributes serialized in fixed order")


def test_group_order_and_delimiters() -> None:
    """Test operation, job, printer group order regardless of insertion order."""
    charset = Attribute("attributes-charset", Charset("utf-8"))
    job_name = Attribute("job-name", NameWithoutLanguage("report"))
    printer_name = Attribute("printer-name", NameWithoutLanguage("p1"))

    attrs = AttributeList()
    attrs.add(PRINTER, printer_name)
    attrs.add(JOB, job_name)
    attrs.add(OP, charset)

    buf = io.BytesIO()
    written = attrs.write(buf)

    expected = (
        b"\x01"
        + _attr_bytes(charset)
        + b"\x02"
        + _attr_bytes(job_name)
        + b"\x04"
        + _attr_bytes(printer_name)
        + b"\x03"
    )
    assert buf.getvalue() == expected
    assert written == len(expected)


def test_header_attributes_only_in_operation_group() -> None:
    """Test that header attribute names in other groups are written normally."""
    uri = Attribute("printer-uri", Uri("ipp://x"))

    attrs = AttributeList()
    attrs.add(PRINTER, uri)

    assert attrs.to_bytes() == b"\x01\x04" + _attr_bytes(uri) + b"\x03"


def test_unsupported_group_not_written() -> None:
    """Test that only operation, job and printer groups are serialized."""
    attrs = AttributeList()
    attrs.add(DelimiterTag.UNSUPPORTED_ATTRIBUTES, Attribute("x", Integer(1)))

    assert attrs.to_bytes() == b"\x01\x03"


def test_into_reader() -> None:
    """Test the readable stream view of a serialized list."""
    attrs = AttributeList()
    attrs.add(JOB, Attribute("job-id", Integer(3)))

    reader = attrs.into_reader()

    assert reader.read() == attrs.to_bytes()


if __name__ == "__main__":
    test_attribute_write_layout()
    test_attribute_write_array()
    test_oversized_name_writes_nothing()
    test_oversized_value_writes_nothing()
    test_add_get_and_overwrite()
    test_empty_list_write()
    test_header_attributes_written_first()
    test_group_order_and_delimiters()
    test_header_attributes_only_in_operation_group()
    test_unsupported_group_not_written()
    test_into_reader()
    print("All attribute tests passed!")
