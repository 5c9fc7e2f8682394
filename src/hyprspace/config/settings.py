"""
============================================================
 File: settings.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Impostazioni centralizzate del progetto. Convenzioni di
     naming degli script, direttiva di dispatch e valori di
     default usati quando config.ini non li definisce.
============================================================
"""

APP_NAME = "hyprspace"

# Sottocartelle relative alla home dell'utente
WORKSPACE_SUBDIR = ".config/hyprspace"
LOGS_SUBDIR = ".local/state/hyprspace"
CONFIG_FILE_NAME = "config.ini"
LOG_FILE_NAME = "hyprspace.log"

# Convenzione: workspace-<short_name>.sh
SCRIPT_PREFIX = "workspace-"
SCRIPT_SUFFIX = ".sh"

DISPATCH_DIRECTIVE = "hyprctl dispatch workspace"

# rwxr-xr-x
SCRIPT_MODE = 0o755

POLL_INTERVAL_MS = 250

# Limite di un intero a 32 bit senza segno per il numero di workspace
MAX_WORKSPACE_NUM = 2**32 - 1
