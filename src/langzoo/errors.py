## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from enum import Enum
from typing import NoReturn

from .position import Position, NOWHERE

__all__ = [
    'ErrorKind', 'ZooError', 'ZooFatalError', 'ZooConfigurationError', 'ZooSyntaxError', 'ZooTypeError',
    'ZooRuntimeError', 'ZooWarning', 'raise_error', 'fatal_error', 'syntax_error', 'typing_error',
    'runtime_error', 'warning_error',
]


class ErrorKind(str, Enum):
    FATAL = "Fatal error"
    SYNTAX = "Syntax error"
    TYPING = "Typing error"
    RUNTIME = "Runtime error"
    WARNING = "Warning"


class ZooError(Exception):
    kind: ErrorKind = ErrorKind.FATAL

    def __init__(self, message: str = "", *, loc: Position = NOWHERE):
        """Base class for all errors raised by the driver and the languages it runs."""
        super().__init__(message)
        self.message: str = message
        self.loc: Position = loc

    @property
    def label(self) -> str:
        return self.kind.value

class ZooFatalError(ZooError):
    kind = ErrorKind.FATAL

class ZooConfigurationError(ZooFatalError):
    """Problems wiring a language into the driver, found before any argument is parsed."""
    pass

class ZooSyntaxError(ZooError):
    kind = ErrorKind.SYNTAX

class ZooTypeError(ZooError, TypeError):
    kind = ErrorKind.TYPING

class ZooRuntimeError(ZooError, RuntimeError):
    kind = ErrorKind.RUNTIME

class ZooWarning(ZooError):
    kind = ErrorKind.WARNING


_ERROR_CLASSES: dict[ErrorKind, type[ZooError]] = {
    ErrorKind.FATAL: ZooFatalError,
    ErrorKind.SYNTAX: ZooSyntaxError,
    ErrorKind.TYPING: ZooTypeError,
    ErrorKind.RUNTIME: ZooRuntimeError,
    ErrorKind.WARNING: ZooWarning,
}


def raise_error(loc: Position, kind: ErrorKind, fmt: str, *args) -> NoReturn:
    """Raise the error of the given kind, with `fmt % args` as message when args are present."""
    raise _ERROR_CLASSES[ErrorKind(kind)](fmt % args if args else fmt, loc=loc)

def fatal_error(loc: Position, fmt: str, *args) -> NoReturn:
    raise_error(loc, ErrorKind.FATAL, fmt, *args)

def syntax_error(loc: Position, fmt: str, *args) -> NoReturn:
    raise_error(loc, ErrorKind.SYNTAX, fmt, *args)

def typing_error(loc: Position, fmt: str, *args) -> NoReturn:
    raise_error(loc, ErrorKind.TYPING, fmt, *args)

def runtime_error(loc: Position, fmt: str, *args) -> NoReturn:
    raise_error(loc, ErrorKind.RUNTIME, fmt, *args)

def warning_error(loc: Position, fmt: str, *args) -> NoReturn:
    raise_error(loc, ErrorKind.WARNING, fmt, *args)
