"""Allow running the CLI with ``python -m where_to_watch.cli``."""

from .main import main

if __name__ == "__main__":
    main()
