## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
from typing import Callable

from .errors import ZooError
from .language import Language, UseFile
from .loader import wrap_syntax_errors
from .position import Source
from .reporting import Reporter


def os_type() -> str:
    if sys.platform == 'win32': return 'Win32'
    if sys.platform == 'cygwin': return 'Cygwin'
    return 'Unix'


def eof_key() -> str:
    return {'Unix': 'Ctrl-D', 'Cygwin': 'Ctrl-D', 'Win32': 'Ctrl-Z'}.get(os_type(), 'EOF')


class Repl:
    def __init__(self, language: Language, use_file: UseFile, reporter: Reporter,
                 read_line: Callable[[str], str] = input):
        self.language = language
        self.use_file = use_file
        self.reporter = reporter
        self.read_line = read_line
        self._parse = wrap_syntax_errors(language.toplevel_parser)

    def banner(self) -> None:
        print(f"{self.language.name} @ programming languages zoo")
        if (directive := self.language.help_directive) is not None:
            print(f'Type {eof_key()} to exit or "{directive}" for help.')
        else:
            print(f"Type {eof_key()} to exit.")

    def read_toplevel(self):
        """Read lines until the language is satisfied, then parse them as one command."""
        text = self.read_line(self.language.prompt)
        while self.language.read_more(text):
            text += '\n' + self.read_line(self.language.more_prompt)
        return self._parse(Source(text + '\n'))

    def run(self, env):
        """Run the shell until end of input, returning the last good environment."""
        if sys.platform != "win32": import readline  # noqa: F401

        self.banner()
        while True:
            try:
                cmd = self.read_toplevel()
                env = self.language.execute(self.use_file, True, env, cmd)
            except ZooError as err:
                self.reporter.error(err)
            except KeyboardInterrupt:
                self.reporter.interrupted()
            except EOFError:
                print("")
                return env
