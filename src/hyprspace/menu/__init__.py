"""
============================================================
File: __init__.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Interfacce utente da terminale: selezione e creazione script.
============================================================
"""
