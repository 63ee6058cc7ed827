## langzoo — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys

import pytest

from langzoo import wrapper
from langzoo.wrapper import exec_wrapper, invocation_argv


class Replaced(Exception):
    """Stands for a successful exec, which never returns."""


def test_missing_wrappers_fall_through_in_order(monkeypatch):
    attempts = []

    def fake_execvp(file, args):
        attempts.append((file, args))
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(wrapper.os, 'execvp', fake_execvp)
    assert exec_wrapper(['rlwrap', 'ledit'], ['python', 'prog.py', '-l', 'a']) is None
    assert attempts == [
        ('rlwrap', ['rlwrap', 'python', 'prog.py', '-l', 'a', '--no-wrapper']),
        ('ledit', ['ledit', 'python', 'prog.py', '-l', 'a', '--no-wrapper']),
    ]


def test_first_launchable_wrapper_replaces_the_process(monkeypatch):
    attempts = []

    def fake_execvp(file, args):
        attempts.append(file)
        if file == 'missing': raise PermissionError(13, "Permission denied")
        raise Replaced

    monkeypatch.setattr(wrapper.os, 'execvp', fake_execvp)
    with pytest.raises(Replaced):
        exec_wrapper(['missing', 'ledit', 'rlwrap'], ['prog'])
    assert attempts == ['missing', 'ledit']


def test_no_candidates_is_not_an_error(monkeypatch):
    monkeypatch.setattr(wrapper.os, 'execvp', lambda *a: pytest.fail("should not exec"))
    exec_wrapper([], ['prog'])


def test_invocation_reruns_the_same_interpreter(monkeypatch):
    monkeypatch.setattr(sys, 'orig_argv', ['python3', '-m', 'langzoo.calc', '-n'], raising=False)
    monkeypatch.setattr(sys, 'executable', '/opt/python/bin/python3')
    assert invocation_argv() == ['/opt/python/bin/python3', '-m', 'langzoo.calc', '-n']


def test_no_wrapper_flag_goes_before_end_of_options(monkeypatch):
    attempts = []

    def fake_execvp(file, args):
        attempts.append(args)
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(wrapper.os, 'execvp', fake_execvp)
    exec_wrapper(['rlwrap'], ['python', '-m', 'langzoo.calc', '-l', 'a', '--', '-n'])
    assert attempts == [['rlwrap', 'python', '-m', 'langzoo.calc', '-l', 'a', '--no-wrapper', '--', '-n']]
