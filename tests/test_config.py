"""Tests for ConfigManager defaults and ini overrides."""
from hyprspace.config.config import ConfigManager


def _write_ini(home, text):
    cfg_dir = home / ".config" / "hyprspace"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.ini").write_text(text)


def test_defaults_follow_home(tmp_path):
    config = ConfigManager(home=tmp_path)
    assert config.config_file is None
    assert config.workspace_dir == tmp_path / ".config" / "hyprspace"
    assert config.logs_dir == tmp_path / ".local" / "state" / "hyprspace"
    assert config.debug is False
    assert config.poll_interval == 0.25


def test_ini_overrides(tmp_path):
    _write_ini(tmp_path, (
        "[PATHS]\n"
        "workspace_directory = /srv/layouts\n"
        "logs_directory = ~/logs\n"
        "[APP]\n"
        "debug = yes\n"
        "[UI]\n"
        "poll_interval_ms = 100\n"
    ))
    config = ConfigManager(home=tmp_path)
    assert config.config_file == tmp_path / ".config" / "hyprspace" / "config.ini"
    assert str(config.workspace_dir) == "/srv/layouts"
    assert config.logs_dir == tmp_path / "logs"
    assert config.debug is True
    assert config.poll_interval == 0.1


def test_malformed_values_fall_back(tmp_path):
    _write_ini(tmp_path, "[APP]\ndebug = maybe\n[UI]\npoll_interval_ms = soon\n")
    config = ConfigManager(home=tmp_path)
    assert config.debug is False
    assert config.poll_interval == 0.25
    assert config.get("NOPE", "key", "fallback") == "fallback"


def test_broken_ini_uses_defaults(tmp_path):
    _write_ini(tmp_path, "not an ini file\n")
    config = ConfigManager(home=tmp_path)
    assert config.workspace_dir == tmp_path / ".config" / "hyprspace"


def test_non_utf8_ini_uses_defaults(tmp_path):
    cfg_dir = tmp_path / ".config" / "hyprspace"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.ini").write_bytes(b"[APP]\ndebug = \xff\xfe\n")
    config = ConfigManager(home=tmp_path)
    assert config.debug is False
    assert config.workspace_dir == cfg_dir
