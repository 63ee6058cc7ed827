## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import abc
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Generic, Mapping, Sequence, TypeVar, TYPE_CHECKING

import click

from .position import Source
from .reporting import Reporter

if TYPE_CHECKING:
    from .loader import FileEntry
    from .options import ToplevelConfig


Env = TypeVar('Env')
Cmd = TypeVar('Cmd')

UseFile = Callable[[Any, 'FileEntry'], Any]


class Language(Generic[Env, Cmd], abc.ABC):
    """Capabilities a language supplies to the toplevel driver.

    The environment and toplevel command types are opaque to the driver, which only threads
    them through `execute`. Set `file_parser = None` for languages that can only be used from
    the interactive shell.
    """

    name: ClassVar[str]
    options: ClassVar[Sequence[click.Option]] = ()
    help_directive: ClassVar[str | None] = None

    prompt: ClassVar[str] = '# '
    more_prompt: ClassVar[str] = '  '

    reporter: Reporter = Reporter()
    settings: Mapping[str, Any] = MappingProxyType({})

    @property
    @abc.abstractmethod
    def initial_environment(self) -> Env: ...

    def configure(self, config: 'ToplevelConfig') -> None:
        """Receive the startup configuration once the command line is parsed."""
        self.reporter = Reporter(config.verbosity)
        self.settings = config.language_options

    def read_more(self, text: str) -> bool:
        return False

    # Defined as a method by languages that can load files.
    file_parser: Callable[[Source], list[Cmd]] | None = None

    @abc.abstractmethod
    def toplevel_parser(self, source: Source) -> Cmd: ...

    @abc.abstractmethod
    def execute(self, use_file: UseFile, interactive: bool, env: Env, cmd: Cmd) -> Env: ...
