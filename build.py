#!/usr/bin/env python3
from __future__ import annotations

import sys

from hypertext.cli import main

if __name__ == "__main__":
    main(sys.argv[1:] or ["build"])
