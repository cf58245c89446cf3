"""Package entry point for ``python -m program_assembler``.

Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it; everything is delegated to the CLI's main().
"""

from program_assembler.cli import main

if __name__ == "__main__":
    main()
