"""Run reprcheck as `python -m reprcheck`."""

from reprcheck.presentation.cli import main

if __name__ == "__main__":
    main()
