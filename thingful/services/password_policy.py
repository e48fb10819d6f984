"""
Password policy - the rules a password must satisfy before it is hashed.

Rules are checked in a fixed order and the first failure wins, so callers get
one deterministic reason per password.
"""

import re

MIN_LENGTH = 8
# bcrypt reads at most 72 bytes; anything longer would be silently truncated.
MAX_LENGTH = 71

# Only these count as special characters.
SPECIAL_CHARACTERS = "!@#$%^&"

TOO_SHORT = "Password must be at least 8 characters"
TOO_LONG = "Password must be less than 72 characters"
SPACE_AT_EDGE = "Password must not start or end with a space"
NOT_COMPLEX = (
    "Password must contain at least one uppercase letter, one lowercase letter, "
    "one number, and one special character"
)

_COMPLEXITY_RE = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[" + re.escape(SPECIAL_CHARACTERS) + r"])\S+"
)


def _utf16_length(password: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(password.encode("utf-16-le", "surrogatepass")) // 2


def validate_password(password: str) -> str | None:
    """Return the reason ``password`` is rejected, or None if it is acceptable."""
    if _utf16_length(password) < MIN_LENGTH:
        return TOO_SHORT

    # UTF-8 bytes are never fewer than UTF-16 units, so this also bounds the length.
    if len(password.encode("utf-8", "surrogatepass")) > MAX_LENGTH:
        return TOO_LONG

    if password.startswith(" "):
        return SPACE_AT_EDGE

    if password.endswith(" "):
        return SPACE_AT_EDGE

    if not _COMPLEXITY_RE.fullmatch(password):
        return NOT_COMPLEX

    return None
