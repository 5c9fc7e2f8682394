"""Shared fixtures. Run from project root: pytest tests/ -v"""
import io

import pytest
from rich.console import Console


class ScriptedKeyboard:
    """Stands in for KeyboardInput: yields a fixed sequence of keys."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.entered = False
        self.exited = False
        self.timeouts = []

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *args):
        self.exited = True
        return False

    def read_key(self, timeout=None):
        self.timeouts.append(timeout)
        if not self.keys:
            raise AssertionError("keyboard script exhausted")
        return self.keys.pop(0)


def make_script(directory, name, body):
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False, width=100, color_system=None)


@pytest.fixture
def scripted_keyboard():
    return ScriptedKeyboard


@pytest.fixture
def write_script():
    return make_script
