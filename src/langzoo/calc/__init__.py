## langzoo — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .interpreter import Calc, check, evaluate
from .parser import parse_file, parse_toplevel
