"""Exceptions raised by the IPP codec."""


class IppError(Exception):
    """Base class for IPP encoding and decoding errors."""


class TagError(IppError, ValueError):
    """A byte is neither a known delimiter nor a known value tag."""

    def __init__(self, tag: int):
        super().__init__(f"Tag error: {tag}")
        self.tag = tag


class IppEOFError(IppError, EOFError):
    """The stream ended in the middle of a field."""


class IppValueError(IppError, ValueError):
    """A value's encoded length does not fit its kind."""


class CollectionDepthError(IppError):
    """Collection nesting is unbalanced or deeper than allowed."""
