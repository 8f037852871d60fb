"""Allow ``python -m stopgraph``."""

from stopgraph.cli import main

if __name__ == "__main__":
    main()
