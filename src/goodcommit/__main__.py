"""Allow running the hook with ``python -m goodcommit``."""

import sys

from goodcommit.cli import main

if __name__ == "__main__":
	sys.exit(main())
