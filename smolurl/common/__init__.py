"""Common utilities for smolurl."""

from .validators import LinkRequest, ValidationResult, validate_link_request, is_valid_url, is_valid_code
from .url_builder import build_short_url, build_error_url
from .logging_config import setup_logging

__all__ = [
    "LinkRequest",
    "ValidationResult",
    "validate_link_request",
    "is_valid_url",
    "is_valid_code",
    "build_short_url",
    "build_error_url",
    "setup_logging",
]
