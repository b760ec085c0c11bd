"""Allow running man_files with ``python -m man_files``."""

from man_files.cli import main

if __name__ == "__main__":
    main()
