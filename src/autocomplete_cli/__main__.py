"""Entry point for ``python -m autocomplete_cli``."""

import sys

from autocomplete_cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
