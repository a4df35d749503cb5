"""IPP attribute values and their binary codec.

Every value kind is a small dataclass that knows its own tag byte. Scalar kinds
encode as ``value-length:2 · value-bytes``; :class:`ListOf` and
:class:`Collection` are compound and write several records in a row.

Decoding goes through a registry keyed by tag byte (see :func:`read_value`),
which covers every :class:`~ippwire.constants.ValueTag` member.
"""

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, BinaryIO, ClassVar

from .constants import MAX_VALUE_LENGTH, ValueTag
from .errors import IppValueError, TagError
from .stream import decode_utf8, read_exact, read_u16, write_bytes, write_u8, write_u16

# ----------------------------------------------------------------------------
# Base classes
# ----------------------------------------------------------------------------


class IppValue(ABC):
    """Base interface for IPP values."""

    @abstractmethod
    def to_tag(self) -> int:
        """Return the value tag this value is written with."""

    @abstractmethod
    def write(self, writer: BinaryIO) -> int:
        """Write the value part of an attribute record and return the byte count."""


class ScalarValue(IppValue):
    """A value encoded as a single length-prefixed record."""

    TAG: ClassVar[int]

    def to_tag(self) -> int:
        return self.TAG

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Encode the value bytes, without the length prefix."""

    @classmethod
    @abstractmethod
    def from_bytes(cls, tag: int, data: bytes) -> "ScalarValue":
        """Decode the value bytes read for ``tag``."""

    def write(self, writer: BinaryIO) -> int:
        data = self.to_bytes()
        if len(data) > MAX_VALUE_LENGTH:
            raise IppValueError(f"Value of {len(data)} bytes does not fit a 2-byte length")
        return write_u16(writer, len(data)) + write_bytes(writer, data)


def _unpack(fmt: str, tag: int, data: bytes) -> tuple:
    if len(data) != struct.calcsize(fmt):
        raise IppValueError(f"Bad value length {len(data)} for tag {tag:#04x}")
    return struct.unpack(fmt, data)


# ----------------------------------------------------------------------------
# Integer kinds
# ----------------------------------------------------------------------------


@dataclass
class Integer(ScalarValue):
    value: int

    TAG = ValueTag.INTEGER

    def to_bytes(self) -> bytes:
        return struct.pack(">i", self.value)

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "Integer":
        return cls(_unpack(">i", tag, data)[0])


@dataclass
class Enum(ScalarValue):
    value: int

    TAG = ValueTag.ENUM

    def to_bytes(self) -> bytes:
        return struct.pack(">i", self.value)

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "Enum":
        return cls(_unpack(">i", tag, data)[0])


@dataclass
class Boolean(ScalarValue):
    value: bool

    TAG = ValueTag.BOOLEAN

    def to_bytes(self) -> bytes:
        return b"\x01" if self.value else b"\x00"

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "Boolean":
        return cls(_unpack(">B", tag, data)[0] != 0)


# ----------------------------------------------------------------------------
# Octet-string kinds
# ----------------------------------------------------------------------------


@dataclass
class OctetString(ScalarValue):
    value: bytes

    TAG = ValueTag.OCTET_STRING_UNSPECIFIED

    def to_bytes(self) -> bytes:
        return self.value

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "OctetString":
        return cls(data)


@dataclass
class DateTime(ScalarValue):
    """RFC 2579 DateAndTime (11 bytes)."""

    year: int
    month: int
    day: int
    hour: int
    minutes: int
    seconds: int
    deci_seconds: int = 0
    utc_dir: str = "+"
    utc_hours: int = 0
    utc_mins: int = 0

    TAG = ValueTag.DATE_TIME
    _FORMAT: ClassVar[str] = ">HBBBBBBcBB"

    def to_bytes(self) -> bytes:
        return struct.pack(
            self._FORMAT,
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minutes,
            self.seconds,
            self.deci_seconds,
            self.utc_dir.encode("ascii"),
            self.utc_hours,
            self.utc_mins,
        )

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "DateTime":
        fields = list(_unpack(cls._FORMAT, tag, data))
        if fields[7] not in (b"+", b"-"):
            raise IppValueError(f"Bad UTC direction {fields[7]!r} for tag {tag:#04x}")
        fields[7] = fields[7].decode("ascii")
        return cls(*fields)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateTime":
        """Build from an aware or naive (treated as UTC) datetime."""
        offset = dt.utcoffset() or timedelta(0)
        minutes = int(offset.total_seconds()) // 60
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minutes=dt.minute,
            seconds=dt.second,
            deci_seconds=dt.microsecond // 100_000,
            utc_dir="-" if minutes < 0 else "+",
            utc_hours=abs(minutes) // 60,
            utc_mins=abs(minutes) % 60,
        )

    def to_datetime(self) -> datetime:
        offset = timedelta(hours=self.utc_hours, minutes=self.utc_mins)
        if self.utc_dir == "-":
            offset = -offset
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minutes,
            self.seconds,
            self.deci_seconds * 100_000,
            tzinfo=timezone(offset),
        )


@dataclass
class Resolution(ScalarValue):
    cross_feed: int
    feed: int
    units: int = 3  # 3 = dots per inch, 4 = dots per centimeter

    TAG = ValueTag.RESOLUTION

    def to_bytes(self) -> bytes:
        return struct.pack(">iib", self.cross_feed, self.feed, self.units)

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "Resolution":
        return cls(*_unpack(">iib", tag, data))


@dataclass
class RangeOfInteger(ScalarValue):
    lower: int
    upper: int

    TAG = ValueTag.RANGE_OF_INTEGER

    def to_bytes(self) -> bytes:
        return struct.pack(">ii", self.lower, self.upper)

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "RangeOfInteger":
        return cls(*_unpack(">ii", tag, data))


@dataclass
class _StringWithLanguage(ScalarValue):
    language: str
    text: str

    def to_bytes(self) -> bytes:
        lang = self.language.encode("utf-8")
        text = self.text.encode("utf-8")
        if len(lang) + len(text) + 4 > MAX_VALUE_LENGTH:
            raise IppValueError(f"Value of {len(lang) + len(text) + 4} bytes does not fit a 2-byte length")
        return struct.pack(">H", len(lang)) + lang + struct.pack(">H", len(text)) + text

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "_StringWithLanguage":
        try:
            (lang_len,) = struct.unpack_from(">H", data, 0)
            lang = data[2 : 2 + lang_len]
            (text_len,) = struct.unpack_from(">H", data, 2 + lang_len)
            text = data[4 + lang_len :]
        except struct.error as exc:
            raise IppValueError(f"Truncated value for tag {tag:#04x}") from exc
        if len(lang) != lang_len or len(text) != text_len:
            raise IppValueError(f"Bad value length {len(data)} for tag {tag:#04x}")
        return cls(decode_utf8(lang), decode_utf8(text))


@dataclass
class TextWithLanguage(_StringWithLanguage):
    TAG = ValueTag.TEXT_WITH_LANGUAGE


@dataclass
class NameWithLanguage(_StringWithLanguage):
    TAG = ValueTag.NAME_WITH_LANGUAGE


# ----------------------------------------------------------------------------
# Character-string kinds
# ----------------------------------------------------------------------------


@dataclass
class _StringValue(ScalarValue):
    value: str

    def to_bytes(self) -> bytes:
        return self.value.encode("utf-8")

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "_StringValue":
        return cls(decode_utf8(data))


@dataclass
class TextWithoutLanguage(_StringValue):
    TAG = ValueTag.TEXT_WITHOUT_LANGUAGE


@dataclass
class NameWithoutLanguage(_StringValue):
    TAG = ValueTag.NAME_WITHOUT_LANGUAGE


@dataclass
class Keyword(_StringValue):
    TAG = ValueTag.KEYWORD


@dataclass
class Uri(_StringValue):
    TAG = ValueTag.URI


@dataclass
class UriScheme(_StringValue):
    TAG = ValueTag.URI_SCHEME


@dataclass
class Charset(_StringValue):
    TAG = ValueTag.CHARSET


@dataclass
class NaturalLanguage(_StringValue):
    TAG = ValueTag.NATURAL_LANGUAGE


@dataclass
class MimeMediaType(_StringValue):
    TAG = ValueTag.MIME_MEDIA_TYPE


@dataclass
class MemberAttrName(_StringValue):
    """Name of the next member inside a collection."""

    TAG = ValueTag.MEMBER_ATTR_NAME


# ----------------------------------------------------------------------------
# Tag-carrying kinds
# ----------------------------------------------------------------------------


@dataclass
class OutOfBand(ScalarValue):
    """Out-of-band value such as ``unknown`` or ``no-value``.

    Normally empty; any bytes a sender attaches are kept as-is.
    """

    tag: int
    data: bytes = b""

    def to_tag(self) -> int:
        return self.tag

    def to_bytes(self) -> bytes:
        return self.data

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "OutOfBand":
        return cls(ValueTag(tag), data)


@dataclass
class Other(ScalarValue):
    """Raw value for structural tags (collection begin/end markers)."""

    tag: int
    data: bytes = b""

    def to_tag(self) -> int:
        return self.tag

    def to_bytes(self) -> bytes:
        return self.data

    @classmethod
    def from_bytes(cls, tag: int, data: bytes) -> "Other":
        return cls(ValueTag(tag), data)


# ----------------------------------------------------------------------------
# Compound kinds
# ----------------------------------------------------------------------------


def _write_record(writer: BinaryIO, value: IppValue) -> int:
    # tag, zero-length name, value
    return write_u8(writer, value.to_tag()) + write_u16(writer, 0) + value.write(writer)


@dataclass
class ListOf(IppValue):
    """Multi-valued attribute; extra values go out as zero-name records."""

    values: list[IppValue] = field(default_factory=list)

    def to_tag(self) -> int:
        if not self.values:
            raise IppValueError("Empty value list has no tag")
        return self.values[0].to_tag()

    def write(self, writer: BinaryIO) -> int:
        first, *rest = self.values
        written = first.write(writer)
        for value in rest:
            written += _write_record(writer, value)
        return written

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass
class Collection(IppValue):
    """Collection value: member names interleaved with member values.

    The sequence is kept flat, as it appears on the wire, e.g.
    ``[MemberAttrName("x-dimension"), Integer(21000), MemberAttrName(...), ...]``.
    """

    values: list[IppValue] = field(default_factory=list)

    def to_tag(self) -> int:
        return ValueTag.BEG_COLLECTION

    def write(self, writer: BinaryIO) -> int:
        written = write_u16(writer, 0)
        for value in self.values:
            written += _write_record(writer, value)
        written += write_u8(writer, ValueTag.END_COLLECTION)
        written += write_u16(writer, 0)
        written += write_u16(writer, 0)
        return written

    @classmethod
    def from_members(cls, members: dict[str, IppValue]) -> "Collection":
        """Build a collection from member name -> value."""
        values: list[IppValue] = []
        for name, value in members.items():
            values.append(MemberAttrName(name))
            if isinstance(value, ListOf):
                values.extend(value.values)
            else:
                values.append(value)
        return cls(values)

    def members(self) -> list[tuple[str, IppValue]]:
        """Pair each member name with its value, collapsing multi-values."""
        pairs: list[tuple[str, list[IppValue]]] = []
        for value in self.values:
            if isinstance(value, MemberAttrName):
                pairs.append((value.value, []))
            elif pairs:
                pairs[-1][1].append(value)
            else:
                raise IppValueError("Collection value without a member name")
        return [(name, list_to_value(values)) for name, values in pairs]


def list_to_value(values: list[IppValue]) -> IppValue:
    """Collapse a one-element list to its element, anything else to ListOf."""
    if len(values) == 1:
        return values[0]
    return ListOf(values)


# ----------------------------------------------------------------------------
# Decoding
# ----------------------------------------------------------------------------

_VALUE_TYPES: dict[int, type[ScalarValue]] = {}


def register_value(tag: int, value_class: type[ScalarValue]) -> None:
    """Register the value class decoded for a tag."""
    _VALUE_TYPES[tag] = value_class


def read_value(tag: int, reader: BinaryIO) -> IppValue:
    """Read ``value-length · value-bytes`` for ``tag`` from the stream."""
    value_class = _VALUE_TYPES.get(tag)
    if value_class is None:
        raise TagError(tag)
    length = read_u16(reader)
    data = read_exact(reader, length)
    return value_class.from_bytes(tag, data)


def from_python(value: Any) -> IppValue:
    """Wrap a plain Python value in the closest IPP value kind."""
    if isinstance(value, IppValue):
        return value
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, str):
        return TextWithoutLanguage(value)
    if isinstance(value, bytes):
        return OctetString(value)
    if isinstance(value, datetime):
        return DateTime.from_datetime(value)
    if isinstance(value, dict):
        return Collection.from_members({k: from_python(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return list_to_value([from_python(v) for v in value])
    raise TypeError(f"Cannot convert {type(value).__name__} to an IPP value")


for _tag in (
    ValueTag.UNSUPPORTED,
    ValueTag.DEFAULT,
    ValueTag.UNKNOWN,
    ValueTag.NO_VALUE,
    ValueTag.NOT_SETTABLE,
    ValueTag.DELETE_ATTRIBUTE,
    ValueTag.ADMIN_DEFINE,
):
    register_value(_tag, OutOfBand)

register_value(ValueTag.INTEGER, Integer)
register_value(ValueTag.BOOLEAN, Boolean)
register_value(ValueTag.ENUM, Enum)
register_value(ValueTag.OCTET_STRING_UNSPECIFIED, OctetString)
register_value(ValueTag.DATE_TIME, DateTime)
register_value(ValueTag.RESOLUTION, Resolution)
register_value(ValueTag.RANGE_OF_INTEGER, RangeOfInteger)
register_value(ValueTag.BEG_COLLECTION, Other)
register_value(ValueTag.TEXT_WITH_LANGUAGE, TextWithLanguage)
register_value(ValueTag.NAME_WITH_LANGUAGE, NameWithLanguage)
register_value(ValueTag.END_COLLECTION, Other)
register_value(ValueTag.TEXT_WITHOUT_LANGUAGE, TextWithoutLanguage)
register_value(ValueTag.NAME_WITHOUT_LANGUAGE, NameWithoutLanguage)
register_value(ValueTag.KEYWORD, Keyword)
register_value(ValueTag.URI, Uri)
register_value(ValueTag.URI_SCHEME, UriScheme)
register_value(ValueTag.CHARSET, Charset)
register_value(ValueTag.NATURAL_LANGUAGE, NaturalLanguage)
register_value(ValueTag.MIME_MEDIA_TYPE, MimeMediaType)
register_value(ValueTag.MEMBER_ATTR_NAME, MemberAttrName)
