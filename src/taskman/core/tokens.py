"""Bounded token buffer built from one shell input line."""

from __future__ import annotations

from collections.abc import Iterator

from taskman.errors import ConfigurationError

MAXLINE = 100
MAXARGS = 25
DELIMITER = " "


def split_line(line: str, *, max_line: int = MAXLINE, limit: int = MAXARGS - 1) -> list[str]:
    """Split a line on single spaces, keeping at most ``limit`` tokens.

    The line is truncated to ``max_line - 1`` characters first. Runs of spaces
    collapse; tabs and newlines are token content.
    """

    scratch = line[: max(max_line - 1, 0)]
    tokens = [token for token in scratch.split(DELIMITER) if token]
    return tokens[:limit]


class TokenBuffer:
    """Ordered raw tokens of one line with a fixed capacity.

    At most ``capacity - 1`` tokens are live; the slot after the last live
    token acts as the terminator and reads as ``None``.
    """

    def __init__(self, capacity: int = MAXARGS) -> None:
        if capacity < 2:
            raise ConfigurationError(f"token buffer capacity must be at least 2, got {capacity}")
        self._capacity = capacity
        self._tokens: list[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._tokens)

    def initialize(self) -> None:
        self._tokens = []

    def tokenize(self, line: str, *, max_line: int = MAXLINE) -> int:
        """Replace the buffer contents with the tokens of ``line``.

        Excess tokens and characters past ``max_line`` are dropped silently.
        Returns the number of tokens kept.
        """

        self.release()
        self._tokens = split_line(line, max_line=max_line, limit=self._capacity - 1)
        return len(self._tokens)

    def release(self) -> None:
        self._tokens.clear()

    def get(self, index: int) -> str | None:
        """Return the token at ``index`` or None past the last live token."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def __getitem__(self, index: int) -> str | None:
        if index < 0 or index >= self._capacity:
            raise IndexError(f"token index {index} outside capacity {self._capacity}")
        return self.get(index)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._tokens))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenBuffer):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenBuffer(capacity={self._capacity}, tokens={self._tokens!r})"
