"""
============================================================
 File: terminal.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Gestione del terminale per la UI di selezione: lettura
     dei tasti senza buffer di riga (termios) e sessione a
     schermo intero (alternate screen di Rich). All'uscita
     dalla sessione il terminale torna sempre in modalità
     normale, anche in caso di eccezione.
============================================================
"""

import os
import select
import sys
from contextlib import contextmanager

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_ENTER = "ENTER"
KEY_ESC = "ESC"

_ARROWS = {"A": KEY_UP, "B": KEY_DOWN, "C": KEY_RIGHT, "D": KEY_LEFT}

# Attesa massima per il resto di una sequenza di escape
_ESCAPE_TIMEOUT = 0.05


class TerminalError(OSError):
    """Il terminale non può essere messo in modalità raw."""


class KeyboardInput:
    """Lettura tasto per tasto da stdin in modalità cbreak"""

    def __init__(self, stream=None):
        import termios
        import tty
        self.termios = termios
        self.tty = tty
        self.stream = stream if stream is not None else sys.stdin
        self.fd = None
        self.old_settings = None

    def __enter__(self):
        if not self.stream.isatty():
            raise TerminalError("standard input is not a terminal")
        self.fd = self.stream.fileno()
        try:
            self.old_settings = self.termios.tcgetattr(self.fd)
            self.tty.setcbreak(self.fd)
        except self.termios.error as e:
            raise TerminalError(f"cannot switch terminal to raw mode: {e}") from e
        return self

    def __exit__(self, *args):
        if self.old_settings is not None:
            self.termios.tcsetattr(self.fd, self.termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
        return False

    def _wait(self, timeout):
        try:
            return bool(select.select([self.fd], [], [], timeout)[0])
        except InterruptedError:
            return False

    def _read_char(self):
        return os.read(self.fd, 1).decode("utf-8", errors="ignore")

    def _read_csi(self):
        # Parametri e intermedi fino al byte finale (@ .. ~), es. \x1b[1;5A
        while self._wait(_ESCAPE_TIMEOUT):
            ch = self._read_char()
            if "@" <= ch <= "~":
                return _ARROWS.get(ch, None)
        return None

    def read_key(self, timeout=None):
        """
        Attende un tasto per al massimo `timeout` secondi.

        Returns:
            Nome del tasto speciale (KEY_*), il carattere letto,
            oppure None se il timeout scade senza input.
        """
        if not self._wait(timeout):
            return None

        ch = self._read_char()
        if ch == "\x1b":
            if not self._wait(_ESCAPE_TIMEOUT):
                return KEY_ESC
            next1 = self._read_char()
            if next1 == "[":
                return self._read_csi()
            if next1 == "O" and self._wait(_ESCAPE_TIMEOUT):
                return _ARROWS.get(self._read_char(), None)
            return KEY_ESC
        if ch in ("\r", "\n"):
            return KEY_ENTER
        return ch or None


@contextmanager
def terminal_session(console, keyboard):
    """
    Acquisisce il terminale per la UI: tastiera in cbreak,
    alternate screen, cursore nascosto.

    Il ripristino avviene in ordine inverso su qualsiasi percorso
    di uscita, prima di restituire il controllo al chiamante.
    """
    with keyboard:
        with console.screen(hide_cursor=True) as screen:
            yield screen
