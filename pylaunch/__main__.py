"""Module entrypoint for running the launcher as ``python -m pylaunch``."""

from pylaunch.cli import main

if __name__ == "__main__":
    main()
