"""Entry point for 'python -m vrishti' command."""

from vrishti.cli import main

if __name__ == "__main__":
    main()
