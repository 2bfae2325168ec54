#!/usr/bin/env python3
"""ProfileSync - Module entry point."""
import sys

from profilesync.cli import main

if __name__ == "__main__":
    sys.exit(main())
