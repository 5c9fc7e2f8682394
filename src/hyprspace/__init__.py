"""
============================================================
File: __init__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Launcher da terminale per gli script di layout dei workspace
Hyprland salvati in ~/.config/hyprspace.
============================================================
"""

__version__ = "0.1.0"
