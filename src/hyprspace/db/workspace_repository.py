"""
============================================================
 File: workspace_repository.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Questo modulo gestisce il caricamento degli script di
     workspace dalla cartella di configurazione. Ogni file
     workspace-<nome>.sh diventa una WorkspaceEntry; il numero
     di workspace viene letto dalla riga
     "hyprctl dispatch workspace N" dello script stesso.
============================================================
"""

from pathlib import Path

from hyprspace.config import settings
from hyprspace.models.workspace_model import WorkspaceEntry
from hyprspace.utils.file_loader import load_file
from hyprspace.utils.logger import logger


def is_workspace_script(file_name):
    return file_name.startswith(settings.SCRIPT_PREFIX) and file_name.endswith(settings.SCRIPT_SUFFIX)


def short_name_for(file_name):
    """workspace-backend.sh -> backend"""
    name = file_name[:-len(settings.SCRIPT_SUFFIX)] if file_name.endswith(settings.SCRIPT_SUFFIX) else file_name
    if name.startswith(settings.SCRIPT_PREFIX):
        name = name[len(settings.SCRIPT_PREFIX):]
    return name


def _parse_unsigned(token):
    if token.startswith("+"):
        token = token[1:]
    if not token or not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > settings.MAX_WORKSPACE_NUM:
        return None
    return value


def parse_workspace_num(text):
    """
    Cerca la direttiva di dispatch nel testo di uno script.

    Le righe vuote e i commenti vengono saltati. Sulla prima riga
    che inizia con la direttiva viene letto l'ultimo token come
    intero; se non è un numero la ricerca prosegue sulle righe
    successive.

    Returns:
        Il numero di workspace, oppure None
    """
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        if not trimmed.startswith(settings.DISPATCH_DIRECTIVE):
            continue

        value = _parse_unsigned(trimmed.split()[-1])
        if value is not None:
            return value

    return None


def read_workspace_num(path):
    content = load_file(path)
    if content is None:
        logger.debug(f"Script non leggibile come testo: {path}")
        return None
    return parse_workspace_num(content)


def ensure_workspace_dir(directory):
    """Crea la cartella dei workspace (ricorsivamente) se non esiste"""
    directory = Path(directory)
    if not directory.exists():
        print(f"Workspace directory {directory} does not exist, creating it...")
        directory.mkdir(parents=True, exist_ok=True)
        logger.info(f"Cartella workspace creata: {directory}")
    return directory


def list_entries(directory):
    """
    Elenca gli script workspace-*.sh contenuti in una cartella.

    Args:
        directory: cartella da scansionare

    Returns:
        Lista di WorkspaceEntry ordinata per nome file. Lista vuota
        se la cartella non esiste.

    Raises:
        OSError: se la cartella esiste ma non è leggibile
    """
    directory = Path(directory)
    if not directory.exists():
        return []

    entries = []
    for path in directory.iterdir():
        if not is_workspace_script(path.name) or not path.is_file():
            continue

        workspace_num = read_workspace_num(path)
        logger.debug(f"Trovato {path.name}: workspace={workspace_num}")

        entries.append(WorkspaceEntry(
            short_name=short_name_for(path.name),
            base_name=path.name,
            full_path=path.absolute(),
            workspace_num=workspace_num,
        ))

    entries.sort(key=lambda e: e.base_name)
    return entries


class WorkspaceRepository:
    def __init__(self, base_path):
        self.base_path = Path(base_path)

    def ensure_dir(self):
        return ensure_workspace_dir(self.base_path)

    def get_entries(self):
        entries = list_entries(self.base_path)
        logger.info(f"Caricate {len(entries)} configurazioni da {self.base_path}")
        return entries
