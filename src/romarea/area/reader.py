"""Line cursor and the primitive readers every section parser builds on."""

import re

from .errors import InvalidDirection, InvalidNumber, InvalidVnum, UnexpectedEof
from .types import Direction

_INT_RE = re.compile(r"[+-]?\d+")

# Area files store C ints.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

DIRECTION_CODES = {str(d.value): d for d in Direction}


class LineCursor:
    """Forward cursor over the physical lines of an area file.

    Section parsers share one cursor; each consumes only its own lines
    and leaves the cursor on the first line it does not own.
    """

    def __init__(self, content: str):
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self._lines = [line.removesuffix("\r") for line in lines]
        self._pos = 0

    @property
    def line_number(self) -> int:
        """1-based number of the last consumed line (0 before any)."""
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self._lines[self._pos]

    def next(self) -> str:
        """Consume and return the next line, or raise UnexpectedEof."""
        if self.at_end():
            raise UnexpectedEof()
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def skip(self) -> None:
        if not self.at_end():
            self._pos += 1


def read_tilde_string(cursor: LineCursor) -> str:
    """Read a field terminated by a line ending in '~'.

    Inner lines are kept verbatim (blank ones too) and joined with
    newlines; the whole result is stripped.
    """
    segments = []
    while True:
        line = cursor.next()
        stripped = line.rstrip()
        if stripped.endswith("~"):
            last = stripped.rstrip("~")
            if last:
                segments.append(last)
            break
        segments.append(line)
    return "\n".join(segments).strip()


def _to_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"invalid literal for int(): {token!r}")
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"number out of range: {token!r}")
    return value


def parse_int(token: str, field: str) -> int:
    try:
        return _to_int(token)
    except ValueError as exc:
        raise InvalidNumber(field, token) from exc


def lenient_int(tokens: list[str], index: int) -> int:
    """Integer at tokens[index], or 0 when absent, malformed or out of range."""
    if index >= len(tokens):
        return 0
    try:
        return _to_int(tokens[index])
    except ValueError:
        return 0


def parse_vnum(line: str) -> int:
    """Decode a '#<int>' marker line."""
    trimmed = line.strip()
    if not trimmed.startswith("#"):
        raise InvalidVnum(f"Invalid vnum format: {trimmed!r}")
    try:
        return _to_int(trimmed[1:])
    except ValueError:
        raise InvalidVnum(f"Invalid vnum format: {trimmed!r}") from None


def parse_direction(line: str) -> Direction:
    """Decode a 'D<digit>' exit marker line."""
    trimmed = line.strip()
    if not trimmed.startswith("D") or len(trimmed) < 2:
        raise InvalidDirection(f"Invalid direction code: {trimmed!r}")
    try:
        return DIRECTION_CODES[trimmed[1]]
    except KeyError:
        raise InvalidDirection(f"Invalid direction code: {trimmed!r}") from None
