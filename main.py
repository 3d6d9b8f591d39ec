"""Development entrypoint for the fairdice command line."""

from __future__ import annotations

import sys

from fairdice.main import main

if __name__ == "__main__":
    sys.exit(main())
