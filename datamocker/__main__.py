"""Run the datamocker CLI as ``python -m datamocker <command>``."""

from datamocker.cli import main

if __name__ == "__main__":
    main()
