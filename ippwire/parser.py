"""Streaming IPP attribute parser."""

import logging
from dataclasses import dataclass, field
from typing import BinaryIO

from .attribute import Attribute, AttributeList
from .config import ParserConfig
from .constants import DelimiterTag, ValueTag, is_delimiter_tag, is_value_tag
from .errors import CollectionDepthError, TagError
from .header import IppHeader
from .stream import read_string, read_u8, read_u16
from .value import Collection, IppValue, list_to_value, read_value

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Header and attributes decoded from one stream."""

    header: IppHeader
    attributes: AttributeList


@dataclass
class _ParseState:
    """In-flight state of a single parse call."""

    # last delimiter tag seen
    current_group: DelimiterTag = DelimiterTag.END_OF_ATTRIBUTES
    # one level per open attribute plus one per open collection
    value_stack: list[list[IppValue]] = field(default_factory=lambda: [[]])
    pending_name: str | None = None
    attributes: AttributeList = field(default_factory=AttributeList)

    def flush(self) -> None:
        """Store the pending attribute under the current group."""
        if self.pending_name is None or not self.value_stack:
            return
        values = self.value_stack.pop()
        self.attributes.add(self.current_group, Attribute(self.pending_name, list_to_value(values)))


class Parser:
    """Decode an IPP header and attribute stream from a binary reader.

    The reader is consumed up to and including the end-of-attributes tag;
    any document data that follows is left unread.
    """

    def __init__(self, reader: BinaryIO, config: ParserConfig | None = None):
        """Initialize parser.

        Args:
            reader: Binary stream positioned at the IPP header
            config: Parser limits, defaults to ParserConfig()
        """
        self.reader = reader
        self.config = config or ParserConfig()

    def parse(self) -> ParseResult:
        """Parse header and attributes.

        Returns:
            Parsed header and attribute list

        Raises:
            TagError: If a byte is neither a delimiter nor a value tag
            CollectionDepthError: If collections nest too deep or unbalanced
            IppEOFError: If the stream ends early
            IppValueError: If a name or value is malformed
        """
        header = IppHeader.from_reader(self.reader)
        logger.debug("IPP header: %s", header)
        attributes = self.parse_attributes()
        return ParseResult(header=header, attributes=attributes)

    def parse_attributes(self) -> AttributeList:
        """Parse the attribute stream that follows the header."""
        state = _ParseState()

        while True:
            tag = read_u8(self.reader)
            if is_delimiter_tag(tag):
                logger.debug("Delimiter tag: %#04x", tag)
                if tag == DelimiterTag.END_OF_ATTRIBUTES:
                    state.flush()
                    break
                try:
                    state.current_group = DelimiterTag(tag)
                except ValueError:
                    raise TagError(tag) from None
            elif is_value_tag(tag):
                self._parse_value(tag, state)
            else:
                raise TagError(tag)

        return state.attributes

    def _parse_value(self, tag: int, state: _ParseState) -> None:
        name_len = read_u16(self.reader)
        name = read_string(self.reader, name_len)
        value = read_value(tag, self.reader)

        logger.debug("Value tag: %#04x: %s: %r", tag, name, value)

        if name_len > 0:
            # single value or start of an array
            if state.pending_name is not None:
                state.flush()
                state.value_stack.append([])
            state.pending_name = name

        if tag == ValueTag.BEG_COLLECTION:
            logger.debug("Begin collection")
            # the bottom level belongs to the attribute itself
            if len(state.value_stack) > self.config.max_collection_depth:
                raise CollectionDepthError(
                    f"Collection nesting deeper than {self.config.max_collection_depth}"
                )
            state.value_stack.append([])
        elif tag == ValueTag.END_COLLECTION:
            logger.debug("End collection")
            if len(state.value_stack) < 2:
                raise CollectionDepthError("End of collection without a matching begin")
            members = state.value_stack.pop()
            state.value_stack[-1].append(Collection(members))
        else:
            state.value_stack[-1].append(value)
