"""utils/validators.py

Character-level validation utilities for uriparts.
"""

import string

DIGITS = frozenset(string.digits)
SCHEME_CHARS = frozenset(string.ascii_letters + string.digits + "+-.")

MAX_PORT = 65535


def is_valid_scheme(scheme: str) -> bool:
    """Check a scheme against ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )."""
    if not scheme or scheme[0] not in string.ascii_letters:
        return False
    return all(char in SCHEME_CHARS for char in scheme)


def is_valid_port(port: str) -> bool:
    """
    Check that a port is non-empty, ASCII digits only, and at most 65535.

    Signs, whitespace and non-ASCII digits are all rejected, unlike int().
    """
    if not port or not all(char in DIGITS for char in port):
        return False
    # Leading zeros are allowed; int() only ever sees at most five digits.
    digits = port.lstrip("0") or "0"
    return len(digits) <= len(str(MAX_PORT)) and int(digits) <= MAX_PORT
