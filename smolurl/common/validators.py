"""Validation utilities for short-link creation requests."""

import ipaddress
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from ..errors import ValidationFailedError, Violation, ViolationKind

MAX_URL_LENGTH = 2048
MAX_CODE_LENGTH = 64

ALLOWED_SCHEMES = ("http", "https", "ftp")

# Whole-string match; a partial match would accept codes like "a b"
CODE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# One DNS label: alphanumerics and inner hyphens, at most 63 characters
HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")

# Paths served by the app itself; a link under one of these would be unreachable
RESERVED_CODES = frozenset({"error", "health", "url"})


@dataclass(frozen=True)
class LinkRequest:
    """Candidate short link as submitted by a caller."""

    url: Optional[str] = None
    code: Optional[str] = None


@dataclass
class ValidationResult:
    """Outcome of validating a LinkRequest.

    On success `url` and `code` hold the trimmed values (`code` stays None
    when the caller did not supply one).
    """

    url: Optional[str] = None
    code: Optional[str] = None
    violations: List[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def to_error(self) -> ValidationFailedError:
        return ValidationFailedError(self.violations)


def is_valid_hostname(hostname: str) -> bool:
    """Check a URL host against the DNS name and IP address grammars."""
    try:
        ipaddress.ip_address(hostname)
        return True
    except ValueError:
        pass

    try:
        ascii_name = hostname.encode("idna").decode("ascii")
    except UnicodeError:
        return False

    if ascii_name.endswith("."):
        ascii_name = ascii_name[:-1]
    if not ascii_name or len(ascii_name) > 253:
        return False

    return all(HOSTNAME_LABEL.match(label) for label in ascii_name.split("."))


def is_reserved_code(code: str) -> bool:
    """Whether a code would be shadowed by one of the app's own routes."""
    return code.lower() in RESERVED_CODES


def is_valid_url(url: Optional[str]) -> Tuple[bool, str]:
    """Validate an absolute URL.

    Args:
        url: The URL to validate (already trimmed)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "url is a required field"

    if len(url) > MAX_URL_LENGTH:
        return False, f"url is too long (max {MAX_URL_LENGTH} characters)"

    if any(char.isspace() for char in url):
        return False, "url must be a valid URL without whitespace"

    try:
        result = urlparse(url)
        # Raises ValueError for non-numeric or out-of-range ports
        result.port
    except ValueError as e:
        return False, f"url must be a valid URL: {e}"

    if result.scheme.lower() not in ALLOWED_SCHEMES:
        return False, "url must be a valid URL with an http, https or ftp scheme"

    if not result.netloc or not result.hostname:
        return False, "url must be a valid URL with a host"

    if not is_valid_hostname(result.hostname):
        return False, f"url must be a valid URL: invalid host '{result.hostname}'"

    return True, ""


def is_valid_code(code: Optional[str]) -> Tuple[bool, str]:
    """Validate a caller-supplied code.

    Args:
        code: The code to validate (already trimmed)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if code is None or not isinstance(code, str) or not code:
        return False, "code must not be empty"

    if len(code) > MAX_CODE_LENGTH:
        return False, f"code must be at most {MAX_CODE_LENGTH} characters"

    if not CODE_PATTERN.match(code):
        return False, "code can only contain letters, numbers, hyphens, and underscores"

    if is_reserved_code(code):
        return False, f"'{code}' is reserved and cannot be used as a code"

    return True, ""


def validate_link_request(request: LinkRequest) -> ValidationResult:
    """Check a creation request and collect every violated field.

    Pure function: no normalization beyond trimming, no store access.
    """
    result = ValidationResult()

    url = request.url.strip() if isinstance(request.url, str) else request.url
    valid, error = is_valid_url(url)
    if valid:
        result.url = url
    else:
        result.violations.append(Violation("url", ViolationKind.INVALID_URL, error))

    if request.code is not None:
        code = request.code.strip() if isinstance(request.code, str) else request.code
        valid, error = is_valid_code(code)
        if valid:
            result.code = code
        else:
            result.violations.append(Violation("code", ViolationKind.INVALID_CODE, error))

    return result
