"""Tests for common utilities."""

import json
import logging
import sys

import pytest

from smolurl.common.logging_config import JsonFormatter, setup_logging
from smolurl.common.url_builder import build_error_url, build_short_url
from smolurl.common.validators import (
    LinkRequest,
    is_reserved_code,
    is_valid_code,
    is_valid_url,
    validate_link_request,
)
from smolurl.errors import ValidationFailedError, ViolationKind


class TestValidators:
    """Test validation utilities."""

    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid

        valid, _ = is_valid_url("http://example.com/path")
        assert valid

        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid

        valid, _ = is_valid_url("ftp://files.example.com/archive.zip")
        assert valid

    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url(None)
        assert not valid

        valid, error = is_valid_url("not-a-url")
        assert not valid

        valid, error = is_valid_url("https://")
        assert not valid
        assert "host" in error.lower()

        valid, error = is_valid_url("javascript:alert(1)")
        assert not valid

        valid, error = is_valid_url("https://example.com/" + "a" * 2048)
        assert not valid
        assert "too long" in error.lower()

    @pytest.mark.parametrize("url", [
        "http://exa mple.com",
        "http://example.com:abc/",
        "http://example.com:99999/",
        "https://ex<ample>.com",
        "https://-example.com",
        "https://example..com",
        "https://exa_mple.com",
    ])
    def test_malformed_urls(self, url):
        """Malformed hosts and ports are rejected."""
        valid, error = is_valid_url(url)
        assert not valid
        assert error

    def test_ip_and_international_hosts(self):
        for url in ("http://127.0.0.1:8080/", "http://[::1]/x", "https://bücher.example/", "http://localhost"):
            valid, error = is_valid_url(url)
            assert valid, error

    def test_valid_codes(self):
        """Test valid code validation."""
        for code in ("promo", "abc123", "test-code", "test_code", "A", "-_-"):
            valid, error = is_valid_code(code)
            assert valid, error

    def test_invalid_codes(self):
        """Test invalid code validation."""
        valid, error = is_valid_code("")
        assert not valid
        assert "empty" in error.lower()

        valid, error = is_valid_code("a" * 65)
        assert not valid
        assert "at most" in error.lower()

        valid, error = is_valid_code("error")
        assert not valid
        assert "reserved" in error.lower()

    def test_reserved_codes_ignore_case(self):
        assert is_reserved_code("ErRoR")
        assert is_reserved_code("HEALTH")
        assert not is_reserved_code("errors")

    def test_code_must_match_entirely(self):
        """One allowed character is not enough; every character must be allowed."""
        for code in ("abc@123", "a b", "promo!", "é", "a/b", "?x"):
            valid, _ = is_valid_code(code)
            assert not valid, code


class TestValidateLinkRequest:
    """Test request-level validation."""

    def test_accepts_url_only(self):
        result = validate_link_request(LinkRequest(url="https://example.com"))

        assert result.ok
        assert result.url == "https://example.com"
        assert result.code is None

    def test_trims_fields(self):
        result = validate_link_request(LinkRequest(url="  https://example.com/x  ", code="  Promo "))

        assert result.ok
        assert result.url == "https://example.com/x"
        assert result.code == "Promo"

    def test_missing_url(self):
        result = validate_link_request(LinkRequest(code="promo"))

        assert not result.ok
        assert [v.field for v in result.violations] == ["url"]
        assert result.violations[0].kind == ViolationKind.INVALID_URL

    def test_blank_code_is_rejected(self):
        result = validate_link_request(LinkRequest(url="https://example.com", code="   "))

        assert not result.ok
        assert result.violations[0].field == "code"
        assert result.violations[0].kind == ViolationKind.INVALID_CODE

    def test_reports_every_violated_field(self):
        result = validate_link_request(LinkRequest(url="not-a-url", code="bad code"))

        assert not result.ok
        assert {v.field for v in result.violations} == {"url", "code"}

        error = result.to_error()
        assert isinstance(error, ValidationFailedError)
        assert error.status_code == 400
        assert error.fields == ["url", "code"]


class TestURLBuilder:
    """Test URL building utilities."""

    def test_build_short_url(self):
        assert build_short_url("ab3f9", "https://short.example") == "https://short.example/ab3f9"

    def test_build_short_url_trailing_slash(self):
        assert build_short_url("ab3f9", "https://short.example/") == "https://short.example/ab3f9"

    def test_build_error_url(self):
        assert build_error_url("https://short.example/") == "https://short.example/error"


class TestJsonLogging:
    """Test the JSON log format."""

    def _record(self, message, exc_info=None):
        return logging.LogRecord("smolurl", logging.INFO, __file__, 1, message, (), exc_info)

    def test_quoted_message_stays_valid_json(self):
        message = 'duplicate key value violates unique constraint "short_links_pkey"'

        line = JsonFormatter().format(self._record(message))

        data = json.loads(line)
        assert data["message"] == message
        assert data["level"] == "INFO"
        assert data["logger"] == "smolurl"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_and_exceptions(self):
        try:
            raise RuntimeError('bad "thing"')
        except RuntimeError:
            record = self._record("failed", exc_info=sys.exc_info())
        record.code = "promo"

        data = json.loads(JsonFormatter().format(record))

        assert data["code"] == "promo"
        assert 'RuntimeError: bad "thing"' in data["exception"]

    def test_setup_logging_emits_json_lines(self, capsys):
        logger = setup_logging(level="INFO", json_format=True)
        try:
            logger.info('Code already in use: promo (constraint "short_links_pkey")')
        finally:
            setup_logging(level="DEBUG")

        lines = capsys.readouterr().out.strip().splitlines()
        data = json.loads(lines[-1])
        assert data["message"] == 'Code already in use: promo (constraint "short_links_pkey")'
