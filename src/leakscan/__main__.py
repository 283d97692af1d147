#!/usr/bin/env python3
"""
Allow running leakscan as a module: python -m leakscan
"""

from leakscan.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
