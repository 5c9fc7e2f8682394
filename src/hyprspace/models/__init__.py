"""
============================================================
File: __init__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Modelli dati del launcher.
============================================================
"""
