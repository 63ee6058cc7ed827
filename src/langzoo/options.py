## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import click

from .errors import ZooConfigurationError
from .language import Language
from .loader import FileEntry
from .position import NOWHERE
from .repl import os_type
from .reporting import DEFAULT_VERBOSITY
from .wrapper import DEFAULT_WRAPPERS, NO_WRAPPER_FLAG


HELP_OPTIONS = ['--help']
_QUEUE_KEY = 'langzoo.files'


@dataclass(frozen=True)
class ToplevelConfig:
    interactive_shell: bool = True
    wrappers: tuple[str, ...] | None = DEFAULT_WRAPPERS
    files: tuple[FileEntry, ...] = ()
    verbosity: int = DEFAULT_VERBOSITY
    language_options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def _print_version(language: Language):
    def callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing: return
        click.echo(f"{language.name} ({os_type()})")
        ctx.exit(0)
    return callback


def driver_options(language: Language) -> list[click.Option]:
    return [
        click.Option(['--wrapper'], metavar='<program>', default=None,
                     help='Specify a command-line wrapper to be used (such as rlwrap or ledit).'),
        click.Option([NO_WRAPPER_FLAG], is_flag=True, help='Do not use a command-line wrapper.'),
        click.Option(['-v', 'version'], is_flag=True, is_eager=True, expose_value=False,
                     callback=_print_version(language), help='Print language information and exit.'),
        click.Option(['-n', 'no_shell'], is_flag=True, help='Do not run the interactive toplevel.'),
        click.Option(['-l', 'load'], metavar='<file>', multiple=True,
                     help='Load <file> into the initial environment.'),
        click.Option(['--verbosity'], type=int, default=DEFAULT_VERBOSITY, show_default=True, metavar='<n>',
                     help='Print diagnostics up to this severity (1 errors, 2 warnings, 3 debug).'),
    ]


def _check_duplicates(params: Sequence[click.Parameter]) -> None:
    seen_flags, seen_names = set(HELP_OPTIONS), set()
    for param in params:
        flags = [*param.opts, *param.secondary_opts] if isinstance(param, click.Option) else []
        for flag in flags:
            if flag in seen_flags:
                raise ZooConfigurationError(f"Command-line option `{flag}` is defined more than once.", loc=NOWHERE)
            seen_flags.add(flag)
        if param.name in seen_names:
            raise ZooConfigurationError(f"Command-line parameter `{param.name}` is defined more than once.", loc=NOWHERE)
        seen_names.add(param.name)


def scan_arguments(command: click.Command, args: Sequence[str]) -> Iterator[tuple[click.Option | None, str | None]]:
    """Walk the raw arguments in order, as `(option, value)` pairs and `(None, file)` for bare ones.

    Options that take a value consume it, attached or from the next argument, and flags come
    with `None`. Unknown options are skipped, click reports them once parsing proper starts.
    """
    options = {opt: param for param in command.params if isinstance(param, click.Option) for opt in param.opts}
    tokens = iter(args)

    def take(param: click.Option, attached: str | None) -> str | None:
        if param.is_flag or param.count: return None
        values = [attached] if attached is not None else []
        while len(values) < max(param.nargs, 1) and (value := next(tokens, None)) is not None:
            values.append(value)
        return values[0] if values else None

    for token in tokens:
        if token == '--':
            yield from ((None, rest) for rest in tokens)
            return
        if token.startswith('--'):
            name, eq, attached = token.partition('=')
            if (param := options.get(name)) is not None:
                yield param, take(param, attached if eq else None)
        elif token.startswith('-') and token != '-':
            # Short options may be clustered (`-nl file`), the first one taking a value ends it.
            for i, ch in enumerate(token[1:], start=2):
                if (param := options.get('-' + ch)) is None: continue
                value = take(param, token[i:] or None)
                yield param, value
                if not (param.is_flag or param.count): break
        else:
            yield None, token


def file_queue(command: click.Command, args: Sequence[str]) -> tuple[FileEntry, ...]:
    """Files to run in the order given, `-l` ones flagged as non-interactive."""
    queue = []
    for param, value in scan_arguments(command, args):
        if param is None:
            queue.append(FileEntry(value, True))
        elif param.name == 'load' and value is not None:
            queue.append(FileEntry(value, False))
    return tuple(queue)


class ToplevelCommand(click.Command):
    def __init__(self, *args, loads_files: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.loads_files = loads_files

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        pieces = "[OPTION] ... [FILE] ..." if self.loads_files else "[OPTION] ..."
        formatter.write_usage(ctx.command_path, pieces)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # `-v` acts as soon as it is reached, before click validates any other argument.
        for param, _ in scan_arguments(self, args):
            if param is not None and param.name == 'version':
                param.callback(ctx, param, True)
        ctx.meta[_QUEUE_KEY] = file_queue(self, args)
        return super().parse_args(ctx, args)


def compose_options(language: Language, run: Callable[[ToplevelConfig], Any]) -> ToplevelCommand:
    """Build the command line of a language: driver options first, then the language's own."""
    if not getattr(language, 'name', None):
        raise ZooConfigurationError(f"Language `{type(language).__name__}` does not declare a name.", loc=NOWHERE)

    own = driver_options(language)
    params = [*own, *language.options, click.Argument(['files'], nargs=-1)]
    _check_duplicates(params)
    driver_names = {p.name for p in own} | {'files'}

    def callback(**values) -> Any:
        ctx = click.get_current_context()
        if values['no_wrapper']: wrappers = None
        elif values['wrapper']: wrappers = (values['wrapper'],)
        else: wrappers = DEFAULT_WRAPPERS

        config = ToplevelConfig(
            interactive_shell=not values['no_shell'] and not values['files'],
            wrappers=wrappers,
            files=ctx.meta.get(_QUEUE_KEY, ()),
            verbosity=values['verbosity'],
            language_options=MappingProxyType({k: v for k, v in values.items() if k not in driver_names}))
        return run(config)

    return ToplevelCommand(language.name, params=params, callback=callback,
                           help=f"Toplevel of the {language.name} language.",
                           context_settings={'help_option_names': HELP_OPTIONS},
                           loads_files=language.file_parser is not None)
