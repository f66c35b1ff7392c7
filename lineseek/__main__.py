"""Module entrypoint for ``python -m lineseek``.

All argument parsing and error handling happen in ``lineseek.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
