"""
============================================================
File: config.py
Author: Hyprspace Maintainers
Created: 2026-10-19

Description:
Gestione della configurazione centralizzata dell'applicazione.
Legge ~/.config/hyprspace/config.ini (se presente) e fornisce
accesso ai settings. La home viene passata esplicitamente per
poter usare directory temporanee nei test.
============================================================
"""

import configparser
from pathlib import Path

from hyprspace.config import settings
from hyprspace.utils.logger import logger


class ConfigManager:
    """Gestore centralizzato della configurazione dell'applicazione"""

    def __init__(self, home=None):
        self.home = Path(home) if home is not None else Path.home()
        self._config = configparser.ConfigParser(interpolation=None)
        self._load_defaults()
        self._config_path = self._find_config_file()

        if self._config_path is not None:
            logger.info(f"Config trovato: {self._config_path}")
            try:
                self._config.read(self._config_path, encoding="utf-8")
            except (configparser.Error, UnicodeDecodeError) as e:
                logger.warning(f"config.ini non valido, usando defaults: {e}")
                self._config = configparser.ConfigParser(interpolation=None)
                self._load_defaults()
        else:
            logger.debug("config.ini non trovato, usando defaults")

    def _find_config_file(self):
        """Cerca config.ini nella cartella di configurazione dell'utente"""
        config_file = self.home / settings.WORKSPACE_SUBDIR / settings.CONFIG_FILE_NAME
        if config_file.is_file():
            return config_file
        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config['PATHS'] = {
            'workspace_directory': f"~/{settings.WORKSPACE_SUBDIR}",
            'logs_directory': f"~/{settings.LOGS_SUBDIR}",
        }
        self._config['APP'] = {
            'debug': 'false',
        }
        self._config['UI'] = {
            'poll_interval_ms': str(settings.POLL_INTERVAL_MS),
        }

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_int(self, section, key, fallback=None):
        """Ottiene un valore intero dalla configurazione"""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key):
        """Ottiene un percorso; '~' e i percorsi relativi puntano alla home"""
        path_str = self.get(section, key)
        if not path_str:
            logger.debug(f"get_path: '{section}.{key}' non trovato in config")
            return None

        if path_str == "~" or path_str.startswith("~/"):
            path_str = path_str[2:]

        path = Path(path_str)
        if path.is_absolute():
            return path
        return self.home / path

    @property
    def workspace_dir(self):
        """Directory degli script workspace-*.sh"""
        path = self.get_path('PATHS', 'workspace_directory')
        if path is None:
            path = self.home / settings.WORKSPACE_SUBDIR
        return path

    @property
    def logs_dir(self):
        """Directory dei log"""
        path = self.get_path('PATHS', 'logs_directory')
        if path is None:
            path = self.home / settings.LOGS_SUBDIR
        return path

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool('APP', 'debug', False)

    @property
    def poll_interval(self):
        """Timeout di attesa input della UI, in secondi"""
        interval_ms = self.get_int('UI', 'poll_interval_ms', settings.POLL_INTERVAL_MS)
        if interval_ms is None or interval_ms <= 0:
            interval_ms = settings.POLL_INTERVAL_MS
        return interval_ms / 1000

    @property
    def config_file(self):
        """Percorso del file di configurazione"""
        return self._config_path
