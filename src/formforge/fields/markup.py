"""Small HTML helpers shared by field, fieldset and form rendering."""

import sys
from collections.abc import Iterable
from typing import Any, TextIO

from markupsafe import escape


def esc(value: Any) -> str:
    """HTML-escape a value for use in an attribute or text node."""
    return str(escape("" if value is None else value))


def join_classes(classes: Iterable[str]) -> str:
    """Join class names into one attribute value, dropping blanks and repeats."""
    seen: list[str] = []
    for cls in classes:
        if cls and cls not in seen:
            seen.append(cls)
    return " ".join(seen)


def attributes(pairs: dict[str, Any]) -> str:
    """Render ``name="value"`` pairs with a leading space, escaping values.

    Pairs whose value is None are skipped.
    """
    return "".join(
        f' {name}="{esc(value)}"' for name, value in pairs.items() if value is not None
    )


def emit(fragment: str, display: bool = False, stream: TextIO | None = None) -> str:
    """Either return a fragment or write it out and return an empty string.

    Callers never have to handle the same output twice: when ``display`` is
    true the fragment goes to ``stream`` (stdout by default) and nothing is
    returned.
    """
    if display:
        (stream or sys.stdout).write(fragment)
        return ""
    return fragment
