## langzoo — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import click
import pytest
from click.testing import CliRunner

from langzoo.calc import Calc
from langzoo.errors import ZooConfigurationError
from langzoo.language import Language
from langzoo.loader import FileEntry
from langzoo.options import ToplevelConfig, compose_options, file_queue
from langzoo.position import Source
from langzoo.repl import os_type
from langzoo.wrapper import DEFAULT_WRAPPERS


class ShellOnly(Language[list, str]):
    name = 'shellonly'
    initial_environment = []

    def toplevel_parser(self, source: Source) -> str:
        return source.text.strip()

    def execute(self, use_file, interactive, env, cmd):
        return [*env, cmd]


def parse_config(*args: str, language=None) -> ToplevelConfig:
    command = compose_options(language or Calc(), lambda config: config)
    return command.main(args=list(args), prog_name='calc', standalone_mode=False)


def test_defaults_run_the_shell_with_wrappers():
    config = parse_config()
    assert config.interactive_shell is True
    assert config.wrappers == DEFAULT_WRAPPERS
    assert config.files == ()
    assert config.verbosity == 2
    assert dict(config.language_options) == {'precision': None}


def test_driver_and_language_options_are_collected():
    config = parse_config('-n', '--wrapper', 'ledit', '--verbosity', '3', '--precision', '2', '-l', 'a.calc')
    assert config.interactive_shell is False
    assert config.wrappers == ('ledit',)
    assert config.verbosity == 3
    assert config.language_options['precision'] == 2
    assert config.files == (FileEntry('a.calc', False),)


def test_no_wrapper_wins_over_wrapper():
    assert parse_config('--wrapper', 'ledit', '--no-wrapper').wrappers is None


def test_files_to_run_disable_the_shell():
    config = parse_config('prog.calc')
    assert config.interactive_shell is False
    assert config.files == (FileEntry('prog.calc', True),)


def test_loaded_files_keep_the_shell():
    config = parse_config('-l', 'lib.calc')
    assert config.interactive_shell is True


def test_language_options_are_read_only():
    config = parse_config('--precision', '3')
    with pytest.raises(TypeError):
        config.language_options['precision'] = 4


# File queue ──────────────────────────────────────────────────────────────────────────────────
def _queue(*args: str) -> list[tuple[str, bool]]:
    return [tuple(entry) for entry in file_queue(compose_options(Calc(), print), list(args))]


def test_loaded_files_run_in_command_line_order():
    assert _queue('-l', 'a', '-l', 'b', '-l', 'c') == [('a', False), ('b', False), ('c', False)]


def test_loaded_and_run_files_keep_their_interleaving():
    assert _queue('-l', 'a', 'b', '-l', 'c', 'd') == [('a', False), ('b', True), ('c', False), ('d', True)]


def test_option_values_are_not_files():
    assert _queue('--wrapper', 'rlwrap', '--verbosity', '3', '--precision=2', 'x') == [('x', True)]


def test_attached_and_clustered_short_options():
    assert _queue('-la', '-nl', 'b', '-n', 'c') == [('a', False), ('b', False), ('c', True)]


def test_double_dash_ends_options():
    assert _queue('-l', 'a', '--', '-l', '-n') == [('a', False), ('-l', True), ('-n', True)]


# Composition ─────────────────────────────────────────────────────────────────────────────────
def test_duplicate_language_flag_is_a_configuration_error():
    class Clashing(ShellOnly):
        options = (click.Option(['-n', '--numbers'], is_flag=True),)

    with pytest.raises(ZooConfigurationError, match="`-n`"):
        compose_options(Clashing(), print)


def test_duplicate_parameter_name_is_a_configuration_error():
    class Clashing(ShellOnly):
        options = (click.Option(['--level', 'verbosity'], type=int),)

    with pytest.raises(ZooConfigurationError, match="`verbosity`"):
        compose_options(Clashing(), print)


def test_help_flag_cannot_be_taken():
    class Clashing(ShellOnly):
        options = (click.Option(['--help'], is_flag=True),)

    with pytest.raises(ZooConfigurationError):
        compose_options(Clashing(), print)


def test_usage_lists_files_when_language_loads_them():
    result = CliRunner().invoke(compose_options(Calc(), print), ['--help'])
    assert result.exit_code == 0
    assert result.output.startswith("Usage: calc [OPTION] ... [FILE] ...")
    assert "--precision <digits>" in result.output
    assert "--no-wrapper" in result.output


def test_usage_omits_files_for_shell_only_languages():
    result = CliRunner().invoke(compose_options(ShellOnly(), print), ['--help'])
    assert result.output.startswith("Usage: shellonly [OPTION] ...\n")


def test_version_flag_prints_and_exits_before_anything_else():
    calls = []
    command = compose_options(Calc(), calls.append)
    result = CliRunner().invoke(command, ['-n', '-l', 'missing.calc', '-v', 'other.calc'])
    assert result.exit_code == 0
    assert result.output == f"calc ({os_type()})\n"
    assert calls == []


@pytest.mark.parametrize("args", [
    ['-v', '--bogus'],
    ['-v', '-l'],
    ['--bogus', '-v', '--verbosity'],
    ['-nv'],
])
def test_version_flag_wins_over_invalid_neighbours(args):
    result = CliRunner().invoke(compose_options(Calc(), print), args)
    assert result.exit_code == 0
    assert result.output == f"calc ({os_type()})\n"


def test_version_taken_as_option_value_is_a_file():
    assert _queue('-l', '-v') == [('-v', False)]
