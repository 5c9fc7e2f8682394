"""
============================================================
File: __init__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Accesso alla cartella degli script di workspace.
============================================================
"""
