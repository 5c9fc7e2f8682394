"""
============================================================
File: __main__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Permette l'avvio con `python -m hyprspace`.
============================================================
"""

import sys

from hyprspace.main import main

if __name__ == "__main__":
    sys.exit(main())
