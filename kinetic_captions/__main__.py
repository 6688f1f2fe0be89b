"""Package entry point for ``python -m kinetic_captions``.

WHY: Render scripts call the compiler as
``python -m kinetic_captions words.json captions.ass`` without depending
on the console script being on PATH.

HOW: Delegates straight to cli.main(), which parses sys.argv.

RULES:
- This file must exist for ``python -m kinetic_captions`` to work.
- Exit codes and stdout/stderr behaviour are those of cli.main().
"""

from kinetic_captions.cli import main

if __name__ == "__main__":
    main()
