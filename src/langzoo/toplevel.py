## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# langzoo — Shared toplevel for small language implementations: files, shell, and errors.
#

import sys
from typing import Callable, Generic, Sequence

import click

from .errors import ZooError
from .language import Language, Env, Cmd
from .loader import Loader
from .options import ToplevelConfig, compose_options
from .repl import Repl
from .reporting import Reporter
from .wrapper import exec_wrapper


class Toplevel(Generic[Env, Cmd]):
    """Command-line driver for a language: load the queued files, then run the shell."""

    def __init__(self, language: Language[Env, Cmd], read_line: Callable[[str], str] = input):
        self.language = language
        self.read_line = read_line
        self.use_file = Loader(language)
        self.command = compose_options(language, self.run)

    def run(self, config: ToplevelConfig) -> Env | None:
        reporter = Reporter(config.verbosity)
        self.language.configure(config)

        if config.interactive_shell and config.wrappers is not None and sys.stdin.isatty():
            exec_wrapper(config.wrappers)

        try:
            env = self.language.initial_environment
            for entry in config.files:
                env = self.use_file(env, entry)
            if config.interactive_shell:
                env = Repl(self.language, self.use_file, reporter, read_line=self.read_line).run(env)
            return env
        except ZooError as err:
            reporter.error(err)
            click.get_current_context().exit(1)

    def main(self, argv: Sequence[str] | None = None, standalone_mode: bool = True):
        args = list(sys.argv[1:] if argv is None else argv)
        return self.command.main(args=args, prog_name=self.language.name, standalone_mode=standalone_mode)
