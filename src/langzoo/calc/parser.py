## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import ast
import functools

import lark

from ..errors import syntax_error
from ..position import Source
from .syntax import Number, Var, Neg, Binary, Define, Eval, Show, Load, ListEnv, Help, Command


GRAMMAR = r"""start: command*
toplevel: command

?command: NAME ASSIGN expr SEMI     -> define
        | "show" expr SEMI          -> show
        | "load" STRING SEMI        -> load
        | "env" SEMI                -> env
        | "help" SEMI               -> help
        | expr SEMI                 -> eval

?expr: sum
?sum: product
    | sum PLUS product              -> binary
    | sum MINUS product             -> binary
?product: unary
    | product STAR unary            -> binary
    | product SLASH unary           -> binary
?unary: atom
    | MINUS unary                   -> neg
?atom: NUMBER                       -> number
    | NAME                          -> var
    | "(" sum ")"

// TOKENS
ASSIGN: ":="
SEMI: ";"
PLUS: "+"
MINUS: "-"
STAR: "*"
SLASH: "/"
NAME: /[a-z_][A-Za-z0-9_]*/
NUMBER: /\d+(?:\.\d+)?(?:[eE][+-]?\d+)?/
STRING: /"(?:[^"\\]|\\.)*"/

// COMMENTS
COMMENT: /#[^\n]*/
BLOCK_COMMENT.2: /\(\*[\s\S]*?\*\)/

%import common.WS
%ignore WS
%ignore COMMENT
%ignore BLOCK_COMMENT
"""

# Strings and complete comments first, so a bare `(*` is only found outside of them.
_COMMENT_SCAN = re.compile(r'"(?:[^"\\]|\\.)*"|#[^\n]*|\(\*[\s\S]*?\*\)|(?P<open>\(\*)')


@functools.cache
def _parser() -> lark.Lark:
    return lark.Lark(GRAMMAR, start=['start', 'toplevel'], parser="lalr", lexer="contextual", propagate_positions=True)


def _number(text: str):
    if any(ch in text for ch in '.eE'): return float(text)
    return int(text)


@lark.v_args(meta=True)
class _Builder(lark.Transformer):
    """Turn the parse tree into commands, every node located in `source`."""

    def __init__(self, source: Source):
        super().__init__()
        self.source = source

    def _loc(self, meta):
        return self.source.position_of(meta)

    def start(self, meta, children): return list(children)
    def toplevel(self, meta, children): return children[0]

    def define(self, meta, children):
        name, _, expr, _ = children
        return Define(name.value, expr, self._loc(meta))
    def show(self, meta, children): return Show(children[0], self._loc(meta))
    def load(self, meta, children): return Load(ast.literal_eval(children[0].value), self._loc(meta))
    def env(self, meta, children): return ListEnv(self._loc(meta))
    def help(self, meta, children): return Help(self._loc(meta))
    def eval(self, meta, children): return Eval(children[0], self._loc(meta))

    def binary(self, meta, children):
        left, op, right = children
        return Binary(op.value, left, right, self._loc(meta))
    def neg(self, meta, children): return Neg(children[1], self._loc(meta))
    def number(self, meta, children): return Number(_number(children[0].value), self._loc(meta))
    def var(self, meta, children): return Var(children[0].value, self._loc(meta))


def _check_comments(source: Source) -> None:
    for match in _COMMENT_SCAN.finditer(source.text):
        if match.group('open') is not None:
            syntax_error(source.end_of_input(), "unterminated comment")


def ends_command(text: str) -> bool:
    """Whether the text ends with `;` once comments are set aside; an open `(*` needs more lines."""
    if any(match.group('open') is not None for match in _COMMENT_SCAN.finditer(text)): return False
    code = _COMMENT_SCAN.sub(lambda match: match.group(0) if match.group(0).startswith('"') else ' ', text)
    return code.rstrip().endswith(';')


def parse(source: Source, start: str = 'start'):
    _check_comments(source)
    tree = _parser().parse(source.text, start=start)
    return _Builder(source).transform(tree)


def parse_file(source: Source) -> list[Command]:
    return parse(source, start='start')


def parse_toplevel(source: Source) -> Command:
    return parse(source, start='toplevel')
