"""
============================================================
File: main.py
Author: Hyprspace Maintainers
Created: 2026-10-19
Last Updated: 2026-10-19

Description:
Entry point del launcher. Carica la configurazione, scansiona
la cartella degli script, avvia il menu di selezione e, a
terminale ripristinato, lancia lo script scelto oppure la
procedura guidata di creazione.
============================================================
"""

import sys

from rich.console import Console

from hyprspace.config.config import ConfigManager
from hyprspace.db.workspace_repository import WorkspaceRepository
from hyprspace.menu.script_wizard import ScriptWizard
from hyprspace.menu.workspace_menu import WorkspaceMenu
from hyprspace.utils.launcher import launch_script
from hyprspace.utils.logger import logger, setup_logger


def run(config):
    repo = WorkspaceRepository(base_path=config.workspace_dir)
    directory = repo.ensure_dir()
    entries = repo.get_entries()

    menu = WorkspaceMenu(entries, poll_interval=config.poll_interval)
    entries, action = menu.start()

    # Da qui il terminale è di nuovo in modalità normale
    if action is None:
        logger.info("Uscita senza selezione")
    elif action.is_launch:
        launch_script(entries[action.index])
    elif action.is_create_new:
        ScriptWizard(directory).run()


def main(home=None):
    err_console = Console(stderr=True)
    try:
        config = ConfigManager(home=home)
        setup_logger(config.logs_dir, debug=config.debug)
        logger.info("=" * 60)
        logger.info("Startup hyprspace")
        logger.info(f"Workspace dir: {config.workspace_dir}")
        run(config)
    except KeyboardInterrupt:
        logger.info("Interrotto dall'utente")
        return 130
    except OSError as e:
        logger.exception(f"ERRORE CRITICO: {e}")
        err_console.print(f"Error: {e}", style="bold red", markup=False, highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
