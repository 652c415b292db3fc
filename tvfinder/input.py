"""A single-line text input buffer with a cursor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from wcwidth import wcwidth


class InputRequest(Enum):
    """Requests that change the input state and carry no argument."""

    GO_TO_PREV_CHAR = auto()
    GO_TO_NEXT_CHAR = auto()
    GO_TO_PREV_WORD = auto()
    GO_TO_NEXT_WORD = auto()
    GO_TO_START = auto()
    GO_TO_END = auto()
    DELETE_PREV_CHAR = auto()
    DELETE_NEXT_CHAR = auto()
    DELETE_PREV_WORD = auto()
    DELETE_NEXT_WORD = auto()
    DELETE_LINE = auto()
    DELETE_TILL_END = auto()


@dataclass(frozen=True)
class SetCursor:
    """Request to move the cursor to ``position`` (clamped to the value length)."""

    position: int


@dataclass(frozen=True)
class InsertChar:
    """Request to insert ``char`` at the cursor."""

    char: str


Request = InputRequest | SetCursor | InsertChar


@dataclass(frozen=True)
class StateChanged:
    """Which parts of the input a request changed."""

    value: bool
    cursor: bool


def _char_width(c: str) -> int:
    return max(wcwidth(c), 0)


def _strip_left(s: str, pred: Callable[[str], bool]) -> str:
    for i, c in enumerate(s):
        if not pred(c):
            return s[i:]
    return ""


def _strip_right(s: str, pred: Callable[[str], bool]) -> str:
    end = len(s)
    while end > 0 and pred(s[end - 1]):
        end -= 1
    return s[:end]


def _before_prev_word(prefix: str) -> str:
    """Drop trailing separators, then the word before them."""
    without_separators = _strip_right(prefix, lambda c: not c.isalnum())
    return _strip_right(without_separators, str.isalnum)


class Input:
    """An input buffer with cursor support.

    The cursor is a character index into the value, from 0 to its length.
    """

    def __init__(self, value: str = "") -> None:
        self._value = value
        self._cursor = len(value)

    def with_value(self, value: str) -> Input:
        """A copy holding ``value``, with the cursor at its end."""
        return Input(value)

    def with_cursor(self, cursor: int) -> Input:
        """A copy with the cursor at ``cursor``, clamped to the value length."""
        copy = Input(self._value)
        copy._cursor = min(cursor, len(self._value))
        return copy

    def reset(self) -> None:
        """Clear the value and move the cursor to the start."""
        self._value = ""
        self._cursor = 0

    def handle(self, request: Request) -> StateChanged | None:
        """Apply ``request``; return what changed, or None if nothing did."""
        value, cursor = self._value, self._cursor
        length = len(value)

        if isinstance(request, SetCursor):
            position = min(request.position, length)
            if cursor == position:
                return None
            self._cursor = position
            return StateChanged(value=False, cursor=True)

        if isinstance(request, InsertChar):
            self._value = value[:cursor] + request.char + value[cursor:]
            self._cursor = cursor + 1
            return StateChanged(value=True, cursor=True)

        if request is InputRequest.DELETE_PREV_CHAR:
            if cursor == 0:
                return None
            self._cursor = cursor - 1
            self._value = value[: cursor - 1] + value[cursor:]
            return StateChanged(value=True, cursor=True)

        if request is InputRequest.DELETE_NEXT_CHAR:
            if cursor == length:
                return None
            self._value = value[:cursor] + value[cursor + 1 :]
            return StateChanged(value=True, cursor=False)

        if request is InputRequest.GO_TO_PREV_CHAR:
            if cursor == 0:
                return None
            self._cursor = cursor - 1
            return StateChanged(value=False, cursor=True)

        if request is InputRequest.GO_TO_NEXT_CHAR:
            if cursor == length:
                return None
            self._cursor = cursor + 1
            return StateChanged(value=False, cursor=True)

        if request is InputRequest.GO_TO_PREV_WORD:
            if cursor == 0:
                return None
            self._cursor = len(_before_prev_word(value[:cursor]))
            return StateChanged(value=False, cursor=True)

        if request is InputRequest.GO_TO_NEXT_WORD:
            if cursor == length:
                return None
            rest = _strip_left(value[cursor:], str.isalnum)
            start = length - len(rest)
            self._cursor = next(
                (start + i for i, c in enumerate(rest) if c.isalnum()), length
            )
            return StateChanged(value=False, cursor=True)

        if request is InputRequest.DELETE_LINE:
            if not value:
                return None
            self._value = ""
            self._cursor = 0
            return StateChanged(value=True, cursor=self._cursor == cursor)

        if request is InputRequest.DELETE_PREV_WORD:
            if cursor == 0:
                return None
            kept = _before_prev_word(value[:cursor])
            self._value = kept + value[cursor:]
            self._cursor = len(kept)
            return StateChanged(value=True, cursor=True)

        if request is InputRequest.DELETE_NEXT_WORD:
            if cursor == length:
                return None
            rest = _strip_left(value[cursor:], str.isalnum)
            rest = _strip_left(rest, lambda c: not c.isalnum())
            self._value = value[:cursor] + rest
            return StateChanged(value=True, cursor=False)

        if request is InputRequest.GO_TO_START:
            if cursor == 0:
                return None
            self._cursor = 0
            return StateChanged(value=False, cursor=True)

        if request is InputRequest.GO_TO_END:
            if cursor == length:
                return None
            self._cursor = length
            return StateChanged(value=False, cursor=True)

        if request is InputRequest.DELETE_TILL_END:
            self._value = value[:cursor]
            return StateChanged(value=True, cursor=False)

        raise TypeError(f"Unknown input request: {request!r}")

    @property
    def value(self) -> str:
        """The current text."""
        return self._value

    @property
    def cursor(self) -> int:
        """The cursor position, in characters."""
        return self._cursor

    def visual_cursor(self) -> int:
        """The cursor position in display columns, counting wide characters."""
        return sum(_char_width(c) for c in self._value[: self._cursor])

    def visual_scroll(self, width: int) -> int:
        """Columns to scroll so the cursor fits in a field ``width`` wide."""
        scroll = max(self.visual_cursor(), width) - width
        scrolled = 0
        for c in self._value:
            if scrolled >= scroll:
                break
            scrolled += _char_width(c)
        return scrolled

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Input(value={self._value!r}, cursor={self._cursor})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return (self._value, self._cursor) == (other._value, other._cursor)

    __hash__ = None  # type: ignore[assignment]