## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# calc — Arithmetic with bindings, the smallest language that exercises the whole toplevel.
#

import operator
from fractions import Fraction

import click

from ..errors import runtime_error, typing_error
from ..language import Language, UseFile
from ..loader import FileEntry
from ..position import Source
from .parser import ends_command, parse_file, parse_toplevel
from .syntax import (Value, Expr, Number, Var, Neg, Binary, Command,
                     Define, Eval, Show, Load, ListEnv, Help, format_expr, format_env, format_value)


Env = dict[str, Value]

HELP_TEXT = """\
  x := expr;      bind the value of expr to x
  expr;           evaluate expr and print its value
  show expr;      print expr with minimal parentheses
  load "file";    run the commands of a file
  env;            list current bindings
  help;           print this message"""


def check(env: Env, expr: Expr) -> None:
    """Reject expressions that mention names without a binding, before evaluating anything."""
    match expr:
        case Var(name=name, loc=loc) if name not in env:
            typing_error(loc, "unknown variable %s", name)
        case Neg(operand=operand):
            check(env, operand)
        case Binary(left=left, right=right):
            check(env, left)
            check(env, right)


def _divide(left: Value, right: Value, loc) -> Value:
    if right == 0:
        runtime_error(loc, "division by zero")
    if isinstance(left, int) and isinstance(right, int):
        result = Fraction(left, right)
        return result.numerator if result.denominator == 1 else result
    return left / right


_ARITHMETIC = {'+': operator.add, '-': operator.sub, '*': operator.mul}


def _apply(op: str, left: Value, right: Value, loc) -> Value:
    # Mixing a float with an int or fraction too large for it raises OverflowError.
    try:
        if op == '/': return _divide(left, right, loc)
        result = _ARITHMETIC[op](left, right)
    except OverflowError:
        runtime_error(loc, "numeric overflow")
    if isinstance(result, Fraction) and result.denominator == 1: return result.numerator
    return result


def evaluate(env: Env, expr: Expr) -> Value:
    match expr:
        case Number(value=value):
            return value
        case Var(name=name):
            return env[name]
        case Neg(operand=operand):
            return -evaluate(env, operand)
        case Binary(op=op, left=left, right=right, loc=loc):
            return _apply(op, evaluate(env, left), evaluate(env, right), loc)
    raise TypeError(f"Not an expression: {expr!r}")


class Calc(Language[Env, Command]):
    name = 'calc'
    help_directive = 'help;'
    prompt = 'calc> '
    more_prompt = '  ... '
    options = (
        click.Option(['--precision'], type=int, default=None, metavar='<digits>',
                     help='Round floating-point results to <digits> decimals when printing.'),
    )

    @property
    def initial_environment(self) -> Env:
        return {}

    @property
    def precision(self) -> int | None:
        return self.settings.get('precision')

    def read_more(self, text: str) -> bool:
        return not ends_command(text)

    def file_parser(self, source: Source) -> list[Command]:
        return parse_file(source)

    def toplevel_parser(self, source: Source) -> Command:
        return parse_toplevel(source)

    def _run(self, env: Env, expr: Expr) -> Value:
        check(env, expr)
        self.reporter.info("evaluating %s", format_expr(expr))
        return evaluate(env, expr)

    def execute(self, use_file: UseFile, interactive: bool, env: Env, cmd: Command) -> Env:
        match cmd:
            case Define(name=name, expr=expr):
                value = self._run(env, expr)
                if name in env: self.reporter.warning("%s is redefined", name)
                if interactive: print(f"{name} = {format_value(value, self.precision)}")
                return {**env, name: value}
            case Eval(expr=expr):
                value = self._run(env, expr)
                if interactive: print(f"= {format_value(value, self.precision)}")
                return env
            case Show(expr=expr):
                print(format_expr(expr))
                return env
            case Load(path=path):
                return use_file(env, FileEntry(path, False))
            case ListEnv():
                print(format_env(env, self.precision))
                return env
            case Help():
                print(HELP_TEXT)
                return env
        raise TypeError(f"Not a toplevel command: {cmd!r}")
