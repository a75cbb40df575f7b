"""Module entrypoint for ``python -m ccd``.

This keeps module-mode execution behavior identical to the ``ccd-pick`` script.
All argument parsing and mode dispatch happen in ``ccd.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
