"""
Tests for the Component lifecycle wrapper and the Qt host.
"""
import pytest
from unittest.mock import MagicMock
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from databind.ui.component import Component, HostNotBoundError, WidgetDesc, WidgetHost
from databind.ui.qt_host import QtWidgetHandle, QtWindowHost


class FakeWidget:
    def __init__(self):
        self.is_disabled = True


class FakeHost:
    def __init__(self, **widgets):
        self.widgets = widgets

    def find_widget(self, name):
        return self.widgets[name]


class RecordingComponent(Component):
    def __init__(self, description):
        super().__init__(description, log=MagicMock())
        self.refreshed = []

    def refresh_widget(self, widget):
        self.refreshed.append(widget)


class TestComponent:

    def test_active_without_host_fails(self):
        component = RecordingComponent(WidgetDesc(name="save"))

        with pytest.raises(HostNotBoundError):
            component.active(True)
        assert not component.is_bound

    def test_refresh_without_host_fails(self):
        component = RecordingComponent(WidgetDesc(name="save"))

        with pytest.raises(HostNotBoundError):
            component.refresh()

    def test_bind_refreshes(self):
        widget = FakeWidget()
        component = RecordingComponent(WidgetDesc(name="save"))

        component.bind(FakeHost(save=widget))

        assert component.refreshed == [widget]
        assert component.is_bound

    def test_active_after_bind(self):
        """After bind, active(True) clears the disabled flag."""
        widget = FakeWidget()
        component = RecordingComponent(WidgetDesc(name="save"))
        component.bind(FakeHost(save=widget))

        component.active(True)
        assert widget.is_disabled is False

        component.active(False)
        assert widget.is_disabled is True
        assert component.refreshed == [widget, widget, widget]

    def test_rebind_swaps_host(self):
        first, second = FakeWidget(), FakeWidget()
        component = RecordingComponent(WidgetDesc(name="save"))

        component.bind(FakeHost(save=first))
        component.bind(FakeHost(save=second))
        component.active(True)

        assert first.is_disabled is True
        assert second.is_disabled is False

    def test_missing_widget_propagates(self):
        component = RecordingComponent(WidgetDesc(name="save"))

        with pytest.raises(KeyError):
            component.bind(FakeHost())

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            Component(WidgetDesc(name="x"))


class TestQtWindowHost:

    def _window(self):
        window = QWidget()
        window.setObjectName("main")
        layout = QVBoxLayout(window)
        button = QPushButton("Save")
        button.setObjectName("save")
        layout.addWidget(button)
        return window, button

    def test_is_widget_host(self, qapp):
        window, _ = self._window()
        assert isinstance(QtWindowHost(window), WidgetHost)

    def test_find_child_by_object_name(self, qapp):
        window, button = self._window()

        handle = QtWindowHost(window).find_widget("save")

        assert isinstance(handle, QtWidgetHandle)
        assert handle.widget is button

    def test_find_window_itself(self, qapp):
        window, _ = self._window()
        assert QtWindowHost(window).find_widget("main").widget is window

    def test_missing_widget(self, qapp):
        window, _ = self._window()

        with pytest.raises(LookupError):
            QtWindowHost(window).find_widget("missing")

    def test_component_toggles_qt_widget(self, qapp):
        window, button = self._window()
        component = RecordingComponent(WidgetDesc(name="save"))
        component.bind(QtWindowHost(window))

        component.active(False)
        assert not button.isEnabled()

        component.active(True)
        assert button.isEnabled()
