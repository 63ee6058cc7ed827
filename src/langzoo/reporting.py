## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
import textwrap

from .errors import ZooError
from .position import format_position


DEFAULT_VERBOSITY = 2


class Reporter:
    """Prints diagnostics to the error stream when their severity is within the verbosity."""

    def __init__(self, verbosity: int = DEFAULT_VERBOSITY, stream=None):
        self.verbosity = verbosity
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stderr

    def message(self, label: str, severity: int, fmt: str, *args, loc=None) -> None:
        if severity > self.verbosity: return
        header = f"{label} at {format_position(loc)}:" if loc is not None else f"{label}:"
        body = fmt % args if args else fmt
        print(header, file=self.stream)
        print(textwrap.indent(body, '  ', lambda _: True), file=self.stream)

    def error(self, err: ZooError) -> None:
        self.message(err.label, 1, "%s", err.message, loc=err.loc)

    def warning(self, fmt: str, *args) -> None:
        self.message("Warning", 2, fmt, *args)

    def info(self, fmt: str, *args) -> None:
        self.message("Debug", 3, fmt, *args)

    def interrupted(self) -> None:
        print("Interrupted.", file=self.stream)
