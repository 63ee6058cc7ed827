## langzoo — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .position import Location, Position, Source, NOWHERE, nowhere, format_position
from .errors import *
from .reporting import Reporter
from .printing import Printer, print_at, print_sequence
from .language import Language
from .loader import FileEntry, Loader, wrap_syntax_errors, read_file
from .options import ToplevelConfig, compose_options
from .repl import Repl
from .wrapper import exec_wrapper
from .toplevel import Toplevel
