"""
============================================================
File: script_wizard.py
Author: Hyprspace Maintainers
Created: 2026-10-19
Last Updated: 2026-10-19

Description:
Procedura guidata (prompt di riga, terminale in modalità
normale) per creare un nuovo script workspace-<nome>.sh:
numero di workspace, nome breve, finestre da aprire con
rule_exec, anteprima e conferma di salvataggio.
============================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

from hyprspace.config import settings
from hyprspace.utils.logger import logger

RULE_EXEC_HELPER = '''rule_exec() {
  local rules="$1"
  shift
  hyprctl dispatch exec "[$rules] $*"
}

'''


@dataclass(frozen=True)
class WindowRule:
    width: str
    height: str
    pos_x: str
    pos_y: str
    command: str


def script_file_name(short_name: str) -> str:
    return f"{settings.SCRIPT_PREFIX}{short_name}{settings.SCRIPT_SUFFIX}"


def build_script(workspace_num: int, windows: List[WindowRule]) -> str:
    """Genera il testo completo dello script bash"""
    content = "#!/bin/bash\n\n"
    content += f"{settings.DISPATCH_DIRECTIVE} {workspace_num}\n\n"
    content += RULE_EXEC_HELPER

    for win in windows:
        content += (
            f'rule_exec "workspace {workspace_num} silent; float; '
            f'size {win.width} {win.height}; move {win.pos_x} {win.pos_y}" \\\n'
            f"  {win.command}\n\n"
        )
    return content


def save_script(path: Path, content: str) -> Path:
    """
    Scrive lo script e lo rende eseguibile (755).

    Raises:
        FileExistsError: se il file esiste già (non viene sovrascritto)
    """
    with open(path, "x", encoding="utf-8") as f:
        f.write(content)
    path.chmod(settings.SCRIPT_MODE)
    return path


class ScriptWizard:
    def __init__(self, directory, console=None):
        self.directory = Path(directory)
        self.console = console or Console()

    def _say(self, message="", style=None):
        self.console.print(message, style=style, markup=False, highlight=False)

    def _header(self, title):
        self.console.print(title, style="bold", markup=False, highlight=False)

    def _ask(self, label):
        return Prompt.ask(label, console=self.console).strip()

    def _ask_non_empty(self, label):
        while True:
            value = self._ask(label)
            if value:
                return value
            self._say("  -> Value cannot be empty, try again.", style="yellow")

    def _ask_workspace_num(self):
        while True:
            value = IntPrompt.ask("Enter workspace number (e.g. 1, 2, 3)", console=self.console)
            if 0 < value <= settings.MAX_WORKSPACE_NUM:
                return value
            self._say(f"Invalid workspace number, please enter an integer between 1 and {settings.MAX_WORKSPACE_NUM}.", style="yellow")

    def _ask_short_name(self):
        while True:
            name = self._ask_non_empty("Enter script short name (e.g. 'backend', 'music', 'dashboard')")
            if "/" in name or name in (".", ".."):
                self._say("  -> The name cannot contain '/', try again.", style="yellow")
                continue
            return name

    def _ask_window(self, index):
        self._say()
        self._header(f"Window #{index} – layout & command")
        return WindowRule(
            width=self._ask_non_empty("  • width  (e.g. 10%)"),
            height=self._ask_non_empty("  • height (e.g. 15%)"),
            pos_x=self._ask_non_empty("  • position X (e.g. 1%)"),
            pos_y=self._ask_non_empty("  • position Y (e.g. 8%)"),
            command=self._ask_non_empty(
                'command (e.g. kitty --hold zsh -c "cava" or firefox --new-window github.com)'
            ),
        )

    def run(self) -> Optional[Path]:
        """
        Esegue la procedura guidata.

        Returns:
            Percorso dello script creato, None se l'utente ha annullato
            o se il file esisteva già.

        Raises:
            OSError: se la scrittura o il chmod falliscono
        """
        try:
            return self._run()
        except EOFError:
            self._say()
            self._say("Input closed, script was not created.")
            logger.info("Creazione script interrotta (EOF su stdin)")
            return None

    def _run(self) -> Optional[Path]:
        self.console.clear()
        self.console.print("Hyprspace · New workspace script\n", style="bold cyan", markup=False)
        self._say(f"Destination directory: {self.directory}")
        self._say("Follow the steps to configure your workspace layout.\n")

        # 1) Numero di workspace
        self._header("Step 1/3 · Workspace target")
        workspace_num = self._ask_workspace_num()
        self._say(f"Will dispatch to workspace {workspace_num}\n")

        # 2) Nome breve dello script
        self._header("Step 2/3 · Script identity")
        short_name = self._ask_short_name()
        file_name = script_file_name(short_name)
        path = self.directory / file_name

        if path.exists():
            self._say(f"File {path} already exists, aborting.", style="red")
            logger.info(f"Creazione annullata, file già esistente: {path}")
            return None

        self._say(f"Script file will be: {path}\n")

        # 3) Finestre da aprire
        self._header("Step 3/3 · Windows layout")
        self._say("You can now add one or more windows using rule_exec.")
        self._say("For each window, you will choose size, position and command.\n")

        windows = []
        while Confirm.ask("Add a window rule_exec?", default=True, console=self.console):
            windows.append(self._ask_window(len(windows) + 1))
            self._say(f"Window #{len(windows)} added.")

        if not windows:
            self._say("\nNo windows were added. The script will only switch workspace.")

        content = build_script(workspace_num, windows)

        self._say()
        self._header("Preview of the generated script:")
        self._say()
        self._say(f"----- {file_name} -----")
        self._say(content)
        self._say("---------------------------\n")

        if not Confirm.ask("Save this script?", default=False, console=self.console):
            self._say("Aborted, script was not created.")
            logger.info("Creazione script annullata dall'utente")
            return None

        try:
            save_script(path, content)
        except FileExistsError:
            self._say(f"File {path} already exists, aborting.", style="red")
            logger.info(f"Creazione annullata, file già esistente: {path}")
            return None

        self._say(f"Created script: {path}")
        logger.info(f"Script creato: {path}")
        return path
