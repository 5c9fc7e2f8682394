"""
============================================================
File: __init__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Package per configurazione e costanti del launcher.
============================================================
"""
