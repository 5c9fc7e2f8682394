"""
============================================================
 File: launcher.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Esecuzione dello script scelto. Lo script eredita stdin,
     stdout e stderr del terminale (nessuna cattura dell'output)
     e il launcher resta in attesa finché non termina.
     Precondizione: la UI ha già ripristinato il terminale.
============================================================
"""

import subprocess

from rich.console import Console

from hyprspace.utils.logger import logger


def launch_script(entry, console=None):
    """
    Lancia lo script di una WorkspaceEntry e attende la fine.

    Returns:
        Exit code del processo figlio (non viene trattato come errore)

    Raises:
        OSError: se lo script non può essere avviato
    """
    console = console or Console()
    console.print(f"Launching: {entry.base_name}", markup=False, highlight=False)
    console.print(f"Path: {entry.full_path}", markup=False, highlight=False)
    console.print()

    logger.info(f"Executing: {entry.full_path}")
    result = subprocess.run([str(entry.full_path)], check=False)

    if result.returncode != 0:
        logger.info(f"{entry.base_name} terminato con exit code {result.returncode}")
    else:
        logger.info(f"{entry.base_name} terminato correttamente")
    return result.returncode
