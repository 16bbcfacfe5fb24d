"""URL building utilities for short links."""


def build_short_url(code: str, base_url: str) -> str:
    """Build the public short link for a code.

    Args:
        code: The short code
        base_url: Public base URL (e.g., https://short.example)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{code}"


def build_error_url(base_url: str) -> str:
    """Default fallback destination for codes that do not resolve."""
    return f"{base_url.rstrip('/')}/error"
