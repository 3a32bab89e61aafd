"""Local access-token lookup for the Granola desktop app."""

from .redaction import REDACTED, sanitize_error_message
from .token import (
    TokenParseError,
    TokenRetrievalError,
    candidate_config_paths,
    get_access_token,
    parse_access_token,
    read_file_with_retry,
)

__all__ = [
    "REDACTED",
    "TokenParseError",
    "TokenRetrievalError",
    "candidate_config_paths",
    "get_access_token",
    "parse_access_token",
    "read_file_with_retry",
    "sanitize_error_message",
]
