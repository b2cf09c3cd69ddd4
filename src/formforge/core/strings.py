"""String helpers shared by fields, fieldsets and forms."""

import re
import uuid

_WORD_START = re.compile(r"(^|\s)(\S)")


def sanitize_string(text: str, replacement: str = "-") -> str:
    """Replace runs of non-word characters and lower-case the result.

    Not reversible: unsanitizing a sanitized string may not give back the
    original.
    """
    return re.sub(r"\W+", replacement, text).lower()


def unsanitize_string(text: str, pattern: str = r"[_-]") -> str:
    """Turn a slug like ``first-name`` into a display string like ``First Name``.

    Matches of ``pattern`` become spaces and the first letter of every word
    is upper-cased. The remaining letters are left alone, so ``zipCode``
    stays ``ZipCode`` rather than becoming ``Zipcode``.
    """
    spaced = re.sub(pattern, " ", text)
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), spaced)


def unique_token(prefix: str) -> str:
    """Generate a fresh identifier such as ``field-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"
