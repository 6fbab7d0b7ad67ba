"""Why a fetch strategy produced no record."""
from enum import Enum


class FailureReason(Enum):
    """Reasons a single strategy attempt yields nothing."""

    NETWORK_FAILURE = "network_failure"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    ENVELOPE_PARSE_FAILURE = "envelope_parse_failure"
    WEAK_SIGNAL_EXTRACTION = "weak_signal_extraction"
    MALFORMED_SOURCE_URL = "malformed_source_url"
    NOT_CONFIGURED = "not_configured"
    UNEXPECTED_ERROR = "unexpected_error"
