import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from unittest.mock import MagicMock
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


class RecordingContext:
    """Binding context that records every set_field call."""

    def __init__(self):
        self.calls = []
        self.handlers = {}

    def set_field(self, name, value):
        self.calls.append((name, value))
        if callable(value):
            self.handlers[name] = value

    def values_for(self, name):
        return [value for field, value in self.calls if field == name and not callable(value)]


@pytest.fixture
def context():
    return RecordingContext()


@pytest.fixture
def log():
    return MagicMock()
