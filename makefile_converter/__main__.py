"""Package entry point for ``python -m makefile_converter``.

WHY: Users run the converter as ``python -m makefile_converter smakefile``
without installing the console script. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() function.

RULES:
- This file must exist for ``python -m makefile_converter`` to work
"""

from makefile_converter.cli import main

if __name__ == "__main__":
    main()
