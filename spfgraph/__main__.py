"""Allow ``python -m spfgraph``."""

from spfgraph.cli import main

if __name__ == "__main__":
    main()
