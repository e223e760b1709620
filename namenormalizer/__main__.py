"""Module entrypoint for ``python -m namenormalizer``.

This keeps module-mode execution behavior identical to the ``nn`` script.
All argument parsing and rename dispatch happen in ``namenormalizer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
