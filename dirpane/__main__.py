"""Module entrypoint for ``python -m dirpane``.

All argument parsing and runtime setup happen in ``dirpane.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
