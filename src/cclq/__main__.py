from __future__ import annotations

"""Allow `python -m cclq`."""

import sys

from cclq.main import main

if __name__ == "__main__":
    sys.exit(main())
