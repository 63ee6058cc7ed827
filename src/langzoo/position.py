## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import bisect
from typing import Any, NamedTuple
from dataclasses import dataclass, field


class Location(NamedTuple):
    """A point in the source: absolute offset, 1-based line, and offset where that line begins."""
    offset: int
    line: int
    line_start: int


@dataclass(frozen=True)
class Position:
    begin: Location
    end: Location
    filename: str = ''

    def __post_init__(self):
        if self.end.offset < self.begin.offset:
            raise ValueError(f"Span ends at offset {self.end.offset} before it begins at {self.begin.offset}.")


class _Nowhere:
    __slots__ = ()

    def __repr__(self):
        return 'NOWHERE'


# Unknown position, for generated terms and setup failures before any source is read.
NOWHERE = _Nowhere()


def nowhere(x: Any) -> tuple[Any, Any]:
    return (x, NOWHERE)


def format_position(loc: Position | _Nowhere) -> str:
    if loc is NOWHERE:
        return "unknown position"
    begin_char = loc.begin.offset - loc.begin.line_start
    end_char = loc.end.offset - loc.begin.line_start
    if loc.filename:
        return f'file "{loc.filename}", line {loc.begin.line}, characters {begin_char}-{end_char}'
    return f"line {loc.begin.line}, characters {begin_char}-{end_char}"


@dataclass
class Source:
    """Text handed to a parser, tagging every position it builds with the source name."""
    text: str
    filename: str = ''
    _line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self):
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(self.text) if ch == '\n']

    def location(self, offset: int) -> Location:
        offset = max(0, min(offset, len(self.text)))
        index = bisect.bisect_right(self._line_starts, offset) - 1
        return Location(offset, index + 1, self._line_starts[index])

    def span(self, start: int, end: int | None = None) -> Position:
        return Position(self.location(start), self.location(start if end is None else end), self.filename)

    def end_of_input(self) -> Position:
        return self.span(len(self.text))

    def position_of(self, node) -> Position:
        # Accepts lark tokens (`start_pos`) and tree metas (`start_pos` once propagated).
        start = getattr(node, 'start_pos', None)
        if start is None: return self.end_of_input()
        return self.span(start, getattr(node, 'end_pos', start))
