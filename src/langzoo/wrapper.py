## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
import sys
from typing import Sequence


DEFAULT_WRAPPERS = ('rlwrap', 'ledit')
NO_WRAPPER_FLAG = '--no-wrapper'


def invocation_argv() -> list[str]:
    """The command line that started this process, interpreter included."""
    argv = list(getattr(sys, 'orig_argv', None) or [sys.executable, *sys.argv])
    if sys.executable: argv[0] = sys.executable
    return argv


def exec_wrapper(candidates: Sequence[str], argv: Sequence[str] | None = None) -> None:
    """Replace this process with the first line-editing wrapper that can be launched.

    The wrapped program receives `--no-wrapper` so it does not wrap itself again, ahead of any
    `--` that turns the remaining arguments into files. Returns normally when none of the
    candidates could be started.
    """
    argv = invocation_argv() if argv is None else list(argv)
    at = argv.index('--') if '--' in argv else len(argv)
    argv.insert(at, NO_WRAPPER_FLAG)
    for wrapper in candidates:
        sys.stdout.flush(); sys.stderr.flush()
        try:
            os.execvp(wrapper, [wrapper, *argv])
        except OSError:
            continue
