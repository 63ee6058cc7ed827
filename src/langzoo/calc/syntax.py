## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from fractions import Fraction
from dataclasses import dataclass, field

from ..position import NOWHERE, Position
from ..printing import Printer, print_sequence

Value = int | float | Fraction


# Expressions ─────────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Number:
    value: Value
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Var:
    name: str
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Neg:
    operand: 'Expr'
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Binary:
    op: str
    left: 'Expr'
    right: 'Expr'
    loc: Position = field(default=NOWHERE, compare=False)

Expr = Number | Var | Neg | Binary


# Toplevel commands ───────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Define:
    name: str
    expr: Expr
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Eval:
    expr: Expr
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Show:
    expr: Expr
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Load:
    path: str
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class ListEnv:
    loc: Position = field(default=NOWHERE, compare=False)

@dataclass(frozen=True)
class Help:
    loc: Position = field(default=NOWHERE, compare=False)

Command = Define | Eval | Show | Load | ListEnv | Help


# Printing ────────────────────────────────────────────────────────────────────────────────────
NEG_LEVEL = 1
BINARY_LEVELS = {'*': 2, '/': 2, '+': 3, '-': 3}


def format_value(value: Value, precision: int | None = None) -> str:
    if isinstance(value, float) and precision is not None:
        value = round(value, precision)
    return str(value)


def format_expr(expr: Expr, max_level: int = 9999, printer: Printer | None = None) -> str:
    """Render with the fewest parentheses that still parse back to the same tree."""
    p = printer or Printer()
    match expr:
        case Number(value=value):
            return p.at(max_level, 0, lambda: format_value(value))
        case Var(name=name):
            return p.at(max_level, 0, lambda: name)
        case Neg(operand=operand):
            return p.at(max_level, NEG_LEVEL, lambda: '-' + format_expr(operand, NEG_LEVEL, p))
        case Binary(op=op, left=left, right=right):
            level = BINARY_LEVELS[op]
            return p.at(max_level, level,
                        lambda: f"{format_expr(left, level, p)} {op} {format_expr(right, level - 1, p)}")
    raise TypeError(f"Not an expression: {expr!r}")


def format_env(env: dict[str, Value], precision: int | None = None) -> str:
    if not env: return "(empty)"
    return print_sequence(sorted(env.items()), lambda kv: f"{kv[0]} = {format_value(kv[1], precision)}", sep=',')
