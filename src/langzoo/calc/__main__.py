## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from ..toplevel import Toplevel
from .interpreter import Calc


def main(argv: list[str] | None = None) -> None:
    Toplevel(Calc()).main(argv)


if __name__ == "__main__":
    main()
