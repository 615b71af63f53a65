"""Entry point for ``python -m skyline_art``."""

from .cli import main

if __name__ == "__main__":
    main()
