"""Package entry point for ``python -m range_remapper``.

WHY: Users run the remapper as ``python -m range_remapper almanac.txt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from range_remapper.cli import main

if __name__ == "__main__":
    main()
