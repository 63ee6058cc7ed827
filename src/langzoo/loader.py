## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
from typing import Any, Callable, NamedTuple

import lark

from .errors import ZooError, fatal_error, syntax_error
from .language import Language
from .position import NOWHERE, Source


class FileEntry(NamedTuple):
    path: str
    interactive: bool


def _error_position(exc: Exception, source: Source):
    if isinstance(exc, lark.exceptions.UnexpectedToken) and exc.token.type != '$END':
        return source.position_of(exc.token)
    if (offset := getattr(exc, 'pos_in_stream', None)) is not None and offset >= 0:
        return source.span(offset, offset + 1)
    return source.end_of_input()


def wrap_syntax_errors(parser: Callable[[Source], Any]) -> Callable[[Source], Any]:
    """Translate parser failures into syntax errors located in the source."""
    def parse(source: Source):
        try:
            return parser(source)
        except (ZooError, RecursionError):
            raise
        except lark.exceptions.UnexpectedCharacters as exc:
            syntax_error(_error_position(exc, source), "unrecognised symbol")
        except Exception as exc:
            syntax_error(_error_position(exc, source), "general confusion")
    return parse


def read_file(parser: Callable[[Source], Any], filename: str):
    """Parse the contents of a file; the handle is closed before any error leaves."""
    try:
        with open(filename, 'r', encoding='utf-8') as fh:
            return parser(Source(fh.read(), filename))
    except (OSError, UnicodeDecodeError) as exc:
        fatal_error(NOWHERE, "%s: %s", filename, getattr(exc, 'strerror', None) or str(exc))


class Loader:
    """The `use_file` callback: load a file and fold the language's execution over it."""

    def __init__(self, language: Language):
        self.language = language
        self._loading: list[str] = []

    def __call__(self, env, entry: FileEntry):
        if self.language.file_parser is None:
            fatal_error(NOWHERE, "Cannot load files, only interactive shell is available")
        path, interactive = entry
        # Files still being executed, outermost first; a file may not load itself, even indirectly.
        key = os.path.realpath(path)
        if key in self._loading:
            fatal_error(NOWHERE, "recursive load of %s", path)
        cmds = read_file(wrap_syntax_errors(self.language.file_parser), path)
        self._loading.append(key)
        try:
            for cmd in cmds:
                env = self.language.execute(self, interactive, env, cmd)
        finally:
            self._loading.pop()
        return env
