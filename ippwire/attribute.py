"""IPP attributes and the group-indexed attribute list."""

import io
from typing import BinaryIO

from .constants import GROUP_ORDER, HEADER_ATTRIBUTES, MAX_NAME_LENGTH, DelimiterTag
from .errors import IppValueError
from .stream import write_bytes, write_u8, write_u16
from .value import IppValue


class Attribute:
    """A single named IPP attribute."""

    def __init__(self, name: str, value: IppValue):
        self._name = name
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> IppValue:
        return self._value

    def write(self, writer: BinaryIO) -> int:
        """Serialize the attribute.

        Layout is ``tag:1 · name-length:2 · name · value``; the tag comes from
        the value.

        Args:
            writer: Binary stream to write to

        Returns:
            Number of bytes written

        Raises:
            IppValueError: If the name or a value is too long for its
                length field; nothing is written in that case
        """
        name = self._name.encode("utf-8")
        if len(name) > MAX_NAME_LENGTH:
            raise IppValueError(f"Attribute name of {len(name)} bytes exceeds {MAX_NAME_LENGTH}")

        # a failed encode writes nothing
        buf = io.BytesIO()
        write_u8(buf, self._value.to_tag())
        write_u16(buf, len(name))
        write_bytes(buf, name)
        self._value.write(buf)
        return write_bytes(writer, buf.getvalue())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    def __repr__(self) -> str:
        return f"Attribute(name={self._name!r}, value={self._value!r})"


class AttributeList:
    """Attributes indexed by delimiter group and then by name.

    Names are unique within a group; adding an existing name replaces it.
    """

    def __init__(self) -> None:
        self._groups: dict[DelimiterTag, dict[str, Attribute]] = {}

    def add(self, group: DelimiterTag, attribute: Attribute) -> None:
        """Add an attribute to a group, replacing one with the same name."""
        self._groups.setdefault(group, {})[attribute.name] = attribute

    def get(self, group: DelimiterTag, name: str) -> Attribute | None:
        return self._groups.get(group, {}).get(name)

    def get_group(self, group: DelimiterTag) -> dict[str, Attribute] | None:
        return self._groups.get(group)

    def get_operation_attributes(self) -> dict[str, Attribute] | None:
        return self.get_group(DelimiterTag.OPERATION_ATTRIBUTES)

    def get_job_attributes(self) -> dict[str, Attribute] | None:
        return self.get_group(DelimiterTag.JOB_ATTRIBUTES)

    def get_printer_attributes(self) -> dict[str, Attribute] | None:
        return self.get_group(DelimiterTag.PRINTER_ATTRIBUTES)

    @property
    def groups(self) -> dict[DelimiterTag, dict[str, Attribute]]:
        return self._groups

    def write(self, writer: BinaryIO) -> int:
        """Serialize the whole attribute stream.

        The operation group tag always goes first, followed by the header
        attributes (charset, natural language, printer URI) in that order.
        Then each non-empty group in operation, job, printer order, and
        finally the end-of-attributes tag.

        Args:
            writer: Binary stream to write to

        Returns:
            Number of bytes written
        """
        written = write_u8(writer, DelimiterTag.OPERATION_ATTRIBUTES)

        for name in HEADER_ATTRIBUTES:
            attribute = self.get(DelimiterTag.OPERATION_ATTRIBUTES, name)
            if attribute is not None:
                written += attribute.write(writer)

        for group in GROUP_ORDER:
            attributes = self._groups.get(group)
            if not attributes:
                continue
            if group != DelimiterTag.OPERATION_ATTRIBUTES:
                written += write_u8(writer, group)
            for attribute in attributes.values():
                if group == DelimiterTag.OPERATION_ATTRIBUTES and attribute.name in HEADER_ATTRIBUTES:
                    continue
                written += attribute.write(writer)

        written += write_u8(writer, DelimiterTag.END_OF_ATTRIBUTES)
        return written

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.write(buf)
        return buf.getvalue()

    def into_reader(self) -> io.BytesIO:
        """Return the serialized list as a readable stream."""
        return io.BytesIO(self.to_bytes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeList):
            return NotImplemented
        return self._groups == other._groups

    def __repr__(self) -> str:
        return f"AttributeList({self._groups!r})"
