# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""ippwire - Internet Printing Protocol attribute encoding and decoding.

This package implements the IPP/1.1 binary wire format (RFC 8010):

- Attribute and AttributeList document model with group-ordered serialization
- Streaming Parser that rebuilds an AttributeList tag by tag, including
  multi-valued attributes and nested collections
- Value codec covering every IPP value tag
- IppHeader and IppMessage for complete requests and responses
"""

# Import public API from modules
from .attribute import Attribute, AttributeList
from .config import ParserConfig
from .constants import (
    DEFAULT_MAX_COLLECTION_DEPTH,
    HEADER_ATTRIBUTES,
    IPP_VERSION,
    DelimiterTag,
    Operation,
    StatusCode,
    ValueTag,
    is_delimiter_tag,
    is_value_tag,
)
from .errors import (
    CollectionDepthError,
    IppEOFError,
    IppError,
    IppValueError,
    TagError,
)
from .header import IppHeader
from .message import IppMessage
from .parser import Parser, ParseResult
from .value import (
    Boolean,
    Charset,
    Collection,
    DateTime,
    Enum,
    Integer,
    IppValue,
    Keyword,
    ListOf,
    MemberAttrName,
    MimeMediaType,
    NaturalLanguage,
    NameWithLanguage,
    NameWithoutLanguage,
    OctetString,
    Other,
    OutOfBand,
    RangeOfInteger,
    Resolution,
    TextWithLanguage,
    TextWithoutLanguage,
    Uri,
    UriScheme,
    from_python,
    list_to_value,
    read_value,
    register_value,
)

# Public API exports
__all__ = [
    # Core classes
    "Attribute",
    "AttributeList",
    "Parser",
    "ParseResult",
    "ParserConfig",
    "IppHeader",
    "IppMessage",
    # Constants and enums
    "DelimiterTag",
    "ValueTag",
    "Operation",
    "StatusCode",
    "HEADER_ATTRIBUTES",
    "IPP_VERSION",
    "DEFAULT_MAX_COLLECTION_DEPTH",
    "is_delimiter_tag",
    "is_value_tag",
    # Errors
    "IppError",
    "TagError",
    "IppEOFError",
    "IppValueError",
    "CollectionDepthError",
    # Values
    "IppValue",
    "Integer",
    "Enum",
    "Boolean",
    "OctetString",
    "DateTime",
    "Resolution",
    "RangeOfInteger",
    "TextWithLanguage",
    "NameWithLanguage",
    "TextWithoutLanguage",
    "NameWithoutLanguage",
    "Keyword",
    "Uri",
    "UriScheme",
    "Charset",
    "NaturalLanguage",
    "MimeMediaType",
    "MemberAttrName",
    "OutOfBand",
    "Other",
    "ListOf",
    "Collection",
    # Value utilities
    "from_python",
    "list_to_value",
    "read_value",
    "register_value",
]
