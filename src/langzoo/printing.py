## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable, Iterable


class Printer:
    """Precedence-aware rendering of expressions, shared by every language's printer.

    Each syntactic form gets an intrinsic level, and each operand position a maximum level
    that still parses unambiguously there. A term whose level exceeds the maximum allowed at
    its position is parenthesized. For nested applications at level 1, `App(App(e1, e2), e3)`
    prints as `e1 e2 e3` and `App(e1, App(e2, e3))` as `e1 (e2 e3)`: the left operand is
    printed with `max_level=1` and the right operand with `max_level=0`.

    Terms nested deeper than `max_depth` are replaced by the `ellipsis` text.
    """

    def __init__(self, max_depth: int = 42, ellipsis: str = '...'):
        self.max_depth = max_depth
        self.ellipsis = ellipsis
        self._depth = 0

    def at(self, max_level: int = 9999, at_level: int = 0, render: Callable[[], str] = lambda: '') -> str:
        if self._depth >= self.max_depth:
            return self.ellipsis
        self._depth += 1
        try:
            text = render()
        finally:
            self._depth -= 1
        return f"({text})" if at_level > max_level else text

    def sequence(self, items: Iterable[Any], render: Callable[[Any], str], sep: str = '') -> str:
        rendered = [self.at(render=lambda item=item: render(item)) for item in items]
        return (sep + ' ').join(rendered)


_PRINTER = Printer()


def print_at(max_level: int = 9999, at_level: int = 0, render: Callable[[], str] = lambda: '') -> str:
    return _PRINTER.at(max_level, at_level, render)


def print_sequence(items: Iterable[Any], render: Callable[[Any], str], sep: str = '') -> str:
    return _PRINTER.sequence(items, render, sep=sep)
