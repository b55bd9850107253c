"""Allow running the CLI with `python -m hassctl`."""

from hassctl.cli.app import main

if __name__ == "__main__":
    main()
