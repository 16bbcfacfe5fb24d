"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class CodeGenerator:
    """Generate random codes for short links.

    Codes are not checked for uniqueness here; the mapping store rejects
    duplicates on insert.
    """

    # URL-safe characters (letters, digits, '-' and '_')
    ALPHABET = string.ascii_letters + string.digits + "-_"

    def __init__(self, length: int = 5):
        """Initialize code generator.

        Args:
            length: Length of generated codes
        """
        if length < 1:
            raise ValueError("Code length must be at least 1")
        self.length = length

    def generate(self, length: Optional[int] = None) -> str:
        """Generate a random code.

        Args:
            length: Length of the code (uses configured length if not specified)

        Returns:
            Random code drawn from ALPHABET using a CSPRNG
        """
        length = length or self.length
        return "".join(secrets.choice(self.ALPHABET) for _ in range(length))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check that code is non-empty and uses only ALPHABET characters."""
        return bool(code) and all(c in CodeGenerator.ALPHABET for c in code)
