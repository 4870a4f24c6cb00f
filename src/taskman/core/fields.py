"""Typed extraction of the optional id and file arguments.

Argument positions are fixed by convention: the id candidate is always token 1
and the file candidate is always token 2, whichever grammar subsets the
instruction belongs to. An instruction that takes a file but no id still reads
its file from token 2.
"""

from __future__ import annotations

import re

from taskman.core.grammar import DEFAULT_GRAMMAR, Grammar
from taskman.core.text import ASCII_WHITESPACE

ID_TOKEN_INDEX = 1
FILE_TOKEN_INDEX = 2
INTEGER_RE = re.compile(r"[+-]?(?P<digits>[0-9]+)")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_ID_DIGITS = len(str(INT_MAX))


def extract_id(
    candidate: str | None,
    instruction: str | None,
    grammar: Grammar = DEFAULT_GRAMMAR,
) -> tuple[int, bool]:
    """Return ``(id, True)`` when the candidate is a complete base-10 integer.

    Leading ASCII whitespace is skipped; anything after the digits rejects the
    token. Values outside the 32-bit signed range are rejected too.
    """

    if candidate is None or not grammar.takes_id(instruction):
        return 0, False
    text = candidate.lstrip(ASCII_WHITESPACE)
    match = INTEGER_RE.fullmatch(text)
    if match is None:
        return 0, False
    digits = match.group("digits").lstrip("0") or "0"
    if len(digits) > MAX_ID_DIGITS:
        return 0, False
    value = -int(digits) if text.startswith("-") else int(digits)
    if not INT_MIN <= value <= INT_MAX:
        return 0, False
    return value, True


def extract_file(
    candidate: str | None,
    instruction: str | None,
    grammar: Grammar = DEFAULT_GRAMMAR,
) -> tuple[str | None, bool]:
    """Return the candidate verbatim for file-bearing instructions.

    No existence, permission or path syntax check is made.
    """

    if candidate is None or not grammar.takes_file(instruction):
        return None, False
    return candidate, True
