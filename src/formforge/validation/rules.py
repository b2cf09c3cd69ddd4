"""Built-in validation rules.

Each rule is a plain predicate ``rule(value, *params) -> bool``. The table
at the bottom of this module maps the names used in field descriptions
(``"maxLength"``, ``"notEmpty"``) to the predicates.

Predicates raise TypeError or ValueError when their parameters cannot be
used (for example ``maxLength`` with a non-numeric limit); the Validator
reports those as UnableToValidateError.
"""

import fnmatch
import mimetypes
import re
from collections.abc import Callable
from datetime import datetime
from pathlib import PurePath
from typing import Any
from urllib.parse import urlsplit

from formforge.core.errors import MimeNotFoundError, NoExtensionError

# =============================================================================
# Patterns
# =============================================================================

# Numeric strings: optional sign, digits with optional fraction, optional exponent
NUMBER_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

# Email: Basic RFC 5322 compliant pattern
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMATS = ("%H:%M", "%H:%M:%S")


# =============================================================================
# Numbers
# =============================================================================


def number(value: Any) -> bool:
    """Numbers and numeric strings; booleans are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and NUMBER_PATTERN.match(value) is not None


def _as_float(value: Any) -> float:
    return float(value)


def integer(value: Any) -> bool:
    """Whole numbers, including ones written with a fraction such as ``4.0``."""
    return number(value) and _as_float(value).is_integer()


def float_(value: Any) -> bool:
    return number(value) and not integer(value)


def positive(value: Any) -> bool:
    return number(value) and _as_float(value) > 0


def negative(value: Any) -> bool:
    return number(value) and _as_float(value) < 0


def zero(value: Any) -> bool:
    return number(value) and _as_float(value) == 0


# =============================================================================
# Strings
# =============================================================================


def string(value: Any) -> bool:
    return isinstance(value, str)


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


def max_length(value: Any, limit: Any) -> bool:
    return string(value) and len(value) <= int(limit)


def min_length(value: Any, limit: Any) -> bool:
    return string(value) and len(value) >= int(limit)


def pattern(value: Any, regex: str) -> bool:
    """The whole value must match ``regex``."""
    return string(value) and re.fullmatch(regex, value) is not None


# =============================================================================
# Formats
# =============================================================================


def email(value: Any) -> bool:
    return string(value) and EMAIL_PATTERN.match(value) is not None


def url(value: Any) -> bool:
    """Absolute URLs: both a scheme and a host are required."""
    if not string(value) or any(char.isspace() for char in value):
        return False
    parts = urlsplit(value)
    return bool(parts.scheme and parts.netloc)


def date(value: Any, date_format: str = DATE_FORMAT) -> bool:
    if not string(value):
        return False
    try:
        datetime.strptime(value, date_format)
    except ValueError:
        return False
    return True


def time(value: Any, *time_formats: str) -> bool:
    """Times such as ``14:30``; pass formats to accept something else."""
    if not string(value):
        return False
    for time_format in time_formats or TIME_FORMATS:
        try:
            datetime.strptime(value, time_format)
        except ValueError:
            continue
        return True
    return False


def uploaded_file_type(value: Any, *allowed: str) -> bool:
    """Check an uploaded file name against allowed types.

    Each allowed entry is an extension (``.pdf``), a MIME type
    (``application/pdf``) or a MIME pattern (``image/*``). With no allowed
    entries any file of a known type passes.

    Raises:
        NoExtensionError: The file name has no extension
        MimeNotFoundError: No MIME type is known for the extension
    """
    if not string(value):
        return False
    extension = PurePath(value).suffix.lower()
    if not extension:
        raise NoExtensionError(f"Cannot determine the type of '{value}': no extension")
    mime_type, _ = mimetypes.guess_type(value, strict=False)
    if mime_type is None:
        raise MimeNotFoundError(f"No MIME type is known for '{extension}' files")
    if not allowed:
        return True
    for entry in allowed:
        entry = entry.lower()
        if entry.startswith("."):
            if entry == extension:
                return True
        elif fnmatch.fnmatch(mime_type, entry):
            return True
    return False


# =============================================================================
# Rule table
# =============================================================================

BUILTIN_RULES: dict[str, Callable[..., bool]] = {
    "number": number,
    "integer": integer,
    "float": float_,
    "positive": positive,
    "negative": negative,
    "zero": zero,
    "string": string,
    "notEmpty": not_empty,
    "maxLength": max_length,
    "minLength": min_length,
    "pattern": pattern,
    "email": email,
    "url": url,
    "date": date,
    "time": time,
    "uploadedFileType": uploaded_file_type,
}
