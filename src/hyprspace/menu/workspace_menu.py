"""
============================================================
File: workspace_menu.py
Author: Hyprspace Maintainers
Created: 2026-10-19
Last Updated: 2026-10-19

Description:
Menu principale del launcher, a schermo intero con Rich.
Mostra gli script trovati più la voce "Create new" in fondo,
gestisce lo spostamento del cursore e restituisce l'azione
scelta. Il terminale viene ripristinato prima del return, così
il chiamante può lanciare lo script o avviare il wizard.
============================================================
"""

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from hyprspace.config import settings
from hyprspace.models.workspace_model import Action
from hyprspace.utils.logger import logger
from hyprspace.utils.terminal import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_UP,
    KeyboardInput,
    terminal_session,
)

CREATE_NEW_LABEL = "➕ Create new workspace script…"
HIGHLIGHT_SYMBOL = "➤ "
HIGHLIGHT_STYLE = "bold cyan"

# Righe del pannello non occupate dalla lista: due bordi e il footer
VIEW_CHROME_ROWS = 4

QUIT_KEYS = ("q", KEY_ESC)
DOWN_KEYS = (KEY_DOWN, "j")
UP_KEYS = (KEY_UP, "k")


def format_entry(index, entry):
    """Testo della riga per la entry in posizione `index` (0-based)"""
    return f"{index + 1}. {entry.workspace_label} {entry.short_name} ({entry.base_name})"


class SelectionState:
    """
    Stato della sessione di selezione.

    Il cursore scorre su len(entries) + 1 voci: l'ultima è sempre
    la voce sintetica di creazione. `action` resta None finché la
    sessione è in corso e anche se l'utente esce senza scegliere.
    """

    def __init__(self, entries):
        self.entries = entries
        self.cursor = 0
        self.action = None
        self.finished = False

    @property
    def total_items(self):
        return len(self.entries) + 1

    def next(self):
        if self.total_items == 0:
            return
        self.cursor = (self.cursor + 1) % self.total_items

    def previous(self):
        if self.total_items == 0:
            return
        if self.cursor == 0:
            self.cursor = self.total_items - 1
        else:
            self.cursor -= 1

    def confirm(self):
        if self.cursor < len(self.entries):
            self.action = Action.launch(self.cursor)
        else:
            self.action = Action.create_new()
        self.finished = True

    def quit(self):
        self.action = None
        self.finished = True

    def handle_key(self, key):
        """Applica un tasto allo stato; ritorna True se la sessione è terminata"""
        if self.finished:
            return True

        if key in QUIT_KEYS:
            self.quit()
        elif key in DOWN_KEYS:
            self.next()
        elif key in UP_KEYS:
            self.previous()
        elif key == KEY_ENTER:
            self.confirm()
        return self.finished


class WorkspaceMenu:
    def __init__(self, entries, console=None, keyboard=None, poll_interval=None):
        self.state = SelectionState(entries)
        self.console = console or Console()
        self.keyboard = keyboard if keyboard is not None else KeyboardInput()
        if poll_interval is None:
            poll_interval = settings.POLL_INTERVAL_MS / 1000
        self.poll_interval = poll_interval
        self.offset = 0

    def _row(self, index, label, extra_style=""):
        selected = index == self.state.cursor
        prefix = HIGHLIGHT_SYMBOL if selected else " " * len(HIGHLIGHT_SYMBOL)
        style = HIGHLIGHT_STYLE if selected else extra_style
        return Text(prefix + label, style=style, no_wrap=True, overflow="ellipsis")

    def visible_range(self):
        """
        Finestra di voci che entra nel terminale.

        L'offset si sposta il minimo indispensabile per tenere il
        cursore visibile, come una lista con scroll.
        """
        capacity = max(1, self.console.size.height - VIEW_CHROME_ROWS)
        total = self.state.total_items
        cursor = self.state.cursor

        if cursor < self.offset:
            self.offset = cursor
        elif cursor >= self.offset + capacity:
            self.offset = cursor - capacity + 1
        self.offset = max(0, min(self.offset, total - capacity))
        return range(self.offset, min(total, self.offset + capacity))

    def build_view(self):
        """Costruisce il renderable Rich per lo stato corrente"""
        entries = self.state.entries
        rows = []
        for idx in self.visible_range():
            if idx < len(entries):
                rows.append(self._row(idx, format_entry(idx, entries[idx])))
            else:
                rows.append(self._row(idx, CREATE_NEW_LABEL, extra_style="green"))

        footer = Text("\n↑/k up · ↓/j down · Enter select · q/Esc quit", style="dim")
        return Panel(
            Group(*rows, footer),
            title=f"Hyprspace • {len(entries)} configuration(s) found",
            title_align="left",
            border_style="cyan",
        )

    def start(self):
        """
        Esegue il loop di selezione.

        Returns:
            (entries, action) - le entry ricevute, invariate, e
            l'azione scelta oppure None se l'utente è uscito.

        Raises:
            TerminalError: se il terminale non può essere acquisito
        """
        with terminal_session(self.console, self.keyboard) as screen:
            while not self.state.finished:
                screen.update(self.build_view())
                key = self.keyboard.read_key(timeout=self.poll_interval)
                if key is None:
                    continue
                self.state.handle_key(key)

        logger.info(f"Sessione di selezione terminata, azione: {self.state.action}")
        return self.state.entries, self.state.action
