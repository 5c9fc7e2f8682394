"""
============================================================
File: __init__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Utility condivise: logging, terminale, lancio processi, file.
============================================================
"""
