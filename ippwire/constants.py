"""IPP wire-format constants and enums (RFC 8010 / RFC 8011)."""

from enum import IntEnum

# ----------------------------------------------------------------------------
# Protocol constants
# ----------------------------------------------------------------------------

IPP_VERSION = (1, 1)
MAX_NAME_LENGTH = 0xFFFF  # 2-byte name-length field
MAX_VALUE_LENGTH = 0xFFFF  # 2-byte value-length field
DEFAULT_MAX_COLLECTION_DEPTH = 16

# ----------------------------------------------------------------------------
# Delimiter (group) tags
# ----------------------------------------------------------------------------


class DelimiterTag(IntEnum):
    """Attribute group delimiters."""

    OPERATION_ATTRIBUTES = 0x01
    JOB_ATTRIBUTES = 0x02
    END_OF_ATTRIBUTES = 0x03
    PRINTER_ATTRIBUTES = 0x04
    UNSUPPORTED_ATTRIBUTES = 0x05


# Wire order of the groups an attribute list emits
GROUP_ORDER = (
    DelimiterTag.OPERATION_ATTRIBUTES,
    DelimiterTag.JOB_ATTRIBUTES,
    DelimiterTag.PRINTER_ATTRIBUTES,
)

# ----------------------------------------------------------------------------
# Value tags
# ----------------------------------------------------------------------------


class ValueTag(IntEnum):
    """Attribute value tags."""

    # Out-of-band values (0x10-0x1F)
    UNSUPPORTED = 0x10
    DEFAULT = 0x11
    UNKNOWN = 0x12
    NO_VALUE = 0x13
    NOT_SETTABLE = 0x15
    DELETE_ATTRIBUTE = 0x16
    ADMIN_DEFINE = 0x17

    # Integer values (0x20-0x2F)
    INTEGER = 0x21
    BOOLEAN = 0x22
    ENUM = 0x23

    # Octet-string values (0x30-0x3F)
    OCTET_STRING_UNSPECIFIED = 0x30
    DATE_TIME = 0x31
    RESOLUTION = 0x32
    RANGE_OF_INTEGER = 0x33
    BEG_COLLECTION = 0x34
    TEXT_WITH_LANGUAGE = 0x35
    NAME_WITH_LANGUAGE = 0x36
    END_COLLECTION = 0x37

    # Character-string values (0x40-0x5F)
    TEXT_WITHOUT_LANGUAGE = 0x41
    NAME_WITHOUT_LANGUAGE = 0x42
    KEYWORD = 0x44
    URI = 0x45
    URI_SCHEME = 0x46
    CHARSET = 0x47
    NATURAL_LANGUAGE = 0x48
    MIME_MEDIA_TYPE = 0x49
    MEMBER_ATTR_NAME = 0x4A


_VALUE_TAGS = frozenset(int(t) for t in ValueTag)


def is_delimiter_tag(tag: int) -> bool:
    """Return True if the byte falls in the delimiter range 0x00-0x0F."""
    return 0x00 <= tag <= 0x0F


def is_value_tag(tag: int) -> bool:
    """Return True if the byte is a known value tag."""
    return tag in _VALUE_TAGS


# ----------------------------------------------------------------------------
# Operations and status codes
# ----------------------------------------------------------------------------


class Operation(IntEnum):
    """IPP/1.1 operation ids."""

    PRINT_JOB = 0x0002
    PRINT_URI = 0x0003
    VALIDATE_JOB = 0x0004
    CREATE_JOB = 0x0005
    SEND_DOCUMENT = 0x0006
    SEND_URI = 0x0007
    CANCEL_JOB = 0x0008
    GET_JOB_ATTRIBUTES = 0x0009
    GET_JOBS = 0x000A
    GET_PRINTER_ATTRIBUTES = 0x000B
    HOLD_JOB = 0x000C
    RELEASE_JOB = 0x000D
    RESTART_JOB = 0x000E
    PAUSE_PRINTER = 0x0010
    RESUME_PRINTER = 0x0011
    PURGE_JOBS = 0x0012


class StatusCode(IntEnum):
    """IPP/1.1 status codes."""

    SUCCESSFUL_OK = 0x0000
    SUCCESSFUL_OK_IGNORED_OR_SUBSTITUTED_ATTRIBUTES = 0x0001
    SUCCESSFUL_OK_CONFLICTING_ATTRIBUTES = 0x0002
    CLIENT_ERROR_BAD_REQUEST = 0x0400
    CLIENT_ERROR_FORBIDDEN = 0x0401
    CLIENT_ERROR_NOT_AUTHENTICATED = 0x0402
    CLIENT_ERROR_NOT_AUTHORIZED = 0x0403
    CLIENT_ERROR_NOT_POSSIBLE = 0x0404
    CLIENT_ERROR_TIMEOUT = 0x0405
    CLIENT_ERROR_NOT_FOUND = 0x0406
    CLIENT_ERROR_GONE = 0x0407
    CLIENT_ERROR_REQUEST_ENTITY_TOO_LARGE = 0x0408
    CLIENT_ERROR_REQUEST_VALUE_TOO_LONG = 0x0409
    CLIENT_ERROR_DOCUMENT_FORMAT_NOT_SUPPORTED = 0x040A
    CLIENT_ERROR_ATTRIBUTES_OR_VALUES_NOT_SUPPORTED = 0x040B
    CLIENT_ERROR_URI_SCHEME_NOT_SUPPORTED = 0x040C
    CLIENT_ERROR_CHARSET_NOT_SUPPORTED = 0x040D
    CLIENT_ERROR_CONFLICTING_ATTRIBUTES = 0x040E
    SERVER_ERROR_INTERNAL_ERROR = 0x0500
    SERVER_ERROR_OPERATION_NOT_SUPPORTED = 0x0501
    SERVER_ERROR_SERVICE_UNAVAILABLE = 0x0502
    SERVER_ERROR_VERSION_NOT_SUPPORTED = 0x0503
    SERVER_ERROR_DEVICE_ERROR = 0x0504
    SERVER_ERROR_TEMPORARY_ERROR = 0x0505
    SERVER_ERROR_NOT_ACCEPTING_JOBS = 0x0506
    SERVER_ERROR_BUSY = 0x0507
    SERVER_ERROR_JOB_CANCELED = 0x0508


# ----------------------------------------------------------------------------
# Attribute names
# ----------------------------------------------------------------------------

ATTRIBUTES_CHARSET = "attributes-charset"
ATTRIBUTES_NATURAL_LANGUAGE = "attributes-natural-language"
PRINTER_URI = "printer-uri"

# Always serialized first, in this order, when present in the operation group
HEADER_ATTRIBUTES = (ATTRIBUTES_CHARSET, ATTRIBUTES_NATURAL_LANGUAGE, PRINTER_URI)

CHARSET_CONFIGURED = "charset-configured"
CHARSET_SUPPORTED = "charset-supported"
COLOR_SUPPORTED = "color-supported"
COPIES_DEFAULT = "copies-default"
COPIES_SUPPORTED = "copies-supported"
DOCUMENT_FORMAT = "document-format"
DOCUMENT_FORMAT_DEFAULT = "document-format-default"
DOCUMENT_FORMAT_SUPPORTED = "document-format-supported"
IPP_VERSIONS_SUPPORTED = "ipp-versions-supported"
JOB_ID = "job-id"
JOB_NAME = "job-name"
JOB_STATE = "job-state"
JOB_STATE_REASONS = "job-state-reasons"
JOB_URI = "job-uri"
LAST_DOCUMENT = "last-document"
MEDIA_COL = "media-col"
MEDIA_DEFAULT = "media-default"
MEDIA_SUPPORTED = "media-supported"
OPERATIONS_SUPPORTED = "operations-supported"
PRINTER_IS_ACCEPTING_JOBS = "printer-is-accepting-jobs"
PRINTER_MAKE_AND_MODEL = "printer-make-and-model"
PRINTER_NAME = "printer-name"
PRINTER_RESOLUTION_DEFAULT = "printer-resolution-default"
PRINTER_STATE = "printer-state"
PRINTER_STATE_MESSAGE = "printer-state-message"
PRINTER_STATE_REASONS = "printer-state-reasons"
PRINTER_UP_TIME = "printer-up-time"
PRINTER_URI_SUPPORTED = "printer-uri-supported"
QUEUED_JOB_COUNT = "queued-job-count"
REQUESTED_ATTRIBUTES = "requested-attributes"
REQUESTING_USER_NAME = "requesting-user-name"
STATUS_MESSAGE = "status-message"
