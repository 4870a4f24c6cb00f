"""String helpers for the read loop."""

from __future__ import annotations

ASCII_WHITESPACE = " \t\n\x0b\x0c\r"


def is_whitespace(text: str | None) -> bool:
    """Return True when ``text`` is missing, empty, or only ASCII whitespace."""

    if text is None:
        return True
    return not text.strip(ASCII_WHITESPACE)
