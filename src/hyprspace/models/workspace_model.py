"""
============================================================
 File: workspace_model.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Modelli dati del launcher. WorkspaceEntry rappresenta uno
     script workspace-*.sh trovato su disco; Action rappresenta
     la scelta fatta dall'utente nella UI di selezione.
============================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LAUNCH = "launch"
CREATE_NEW = "create_new"


@dataclass(frozen=True)
class WorkspaceEntry:
    """Uno script di layout scoperto nella cartella dei workspace."""
    short_name: str                 # "backend" per "workspace-backend.sh"
    base_name: str                  # nome file, chiave di ordinamento
    full_path: Path                 # percorso assoluto dello script
    workspace_num: Optional[int] = None

    @property
    def workspace_label(self) -> str:
        if self.workspace_num is None:
            return "[ws ?]"
        return f"[ws {self.workspace_num}]"


@dataclass(frozen=True)
class Action:
    """Esito risolto della sessione di selezione."""
    kind: str                       # LAUNCH | CREATE_NEW
    index: Optional[int] = None     # solo per LAUNCH

    @classmethod
    def launch(cls, index: int) -> Action:
        return cls(kind=LAUNCH, index=index)

    @classmethod
    def create_new(cls) -> Action:
        return cls(kind=CREATE_NEW)

    @property
    def is_launch(self) -> bool:
        return self.kind == LAUNCH

    @property
    def is_create_new(self) -> bool:
        return self.kind == CREATE_NEW
