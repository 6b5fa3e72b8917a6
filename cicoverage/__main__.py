import sys

from cicoverage.cli import main

if __name__ == "__main__":
    sys.exit(main())
