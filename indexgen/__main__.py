"""Module entrypoint for ``python -m indexgen``.

Behaves exactly like the console script; all argument parsing and run setup
happen in ``indexgen.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
