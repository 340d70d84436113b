#!/usr/bin/env python3
"""Start the console client with Logfire error tracking for startup errors."""

import sys

from threadview.interface.console.app import main

if __name__ == "__main__":
    sys.exit(main())
