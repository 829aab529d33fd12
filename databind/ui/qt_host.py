"""
PySide6 host for components.

Widgets are found by ``objectName`` anywhere below the window.
"""
from PySide6.QtWidgets import QWidget


class QtWidgetHandle:
    """Exposes a QWidget's enabled state as ``is_disabled``."""

    def __init__(self, widget: QWidget):
        self.widget = widget

    @property
    def is_disabled(self) -> bool:
        return not self.widget.isEnabled()

    @is_disabled.setter
    def is_disabled(self, value: bool) -> None:
        self.widget.setEnabled(not value)

    def __repr__(self) -> str:
        return f"QtWidgetHandle({self.widget.objectName()!r})"


class QtWindowHost:
    """Host window backed by a QWidget tree."""

    def __init__(self, window: QWidget):
        self.window = window

    def find_widget(self, name: str) -> QtWidgetHandle:
        if self.window.objectName() == name:
            return QtWidgetHandle(self.window)

        widget = self.window.findChild(QWidget, name)
        if widget is None:
            raise LookupError(f"Window has no widget named '{name}'")
        return QtWidgetHandle(widget)
