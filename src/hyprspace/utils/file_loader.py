"""
============================================================
 File: file_loader.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Funzioni di utilità dedicate alla gestione di file.
     Fornisce un metodo semplice per leggere file di testo
     in modo sicuro e centralizzato.
============================================================
"""

from pathlib import Path


def load_file(path):
    """Ritorna il contenuto testuale del file, None se illeggibile o non testo"""
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
