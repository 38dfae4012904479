"""Package entry point for ``python -m wavdump``.

WHY: Users run the tool as ``python -m wavdump -fin 500 < in.txt`` when the
console script is not on PATH.

HOW: Delegates to the CLI's main() function.
"""

from wavdump.cli import main

if __name__ == "__main__":
    main()
