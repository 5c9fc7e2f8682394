"""
============================================================
 File: logger.py
 Author: Hyprspace Maintainers
 Created: 2026-10-19
 Last Updated: 2026-10-19

 Description:
     Logger del launcher, pensato per debugging e tracing delle
     esecuzioni. Scrive solo su file: il terminale appartiene
     alla UI, agli script lanciati o al wizard.
============================================================
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from hyprspace.config import settings

logger = logging.getLogger(settings.APP_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(logs_dir, debug=False):
    """Configura il file di log; chiamate ripetute non duplicano gli handler"""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    # Assicura che la cartella logs esista
    log_file_path = Path(logs_dir) / settings.LOG_FILE_NAME
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(file_handler)
    return logger
