from databind.ui.component import Component, HostNotBoundError, Widget, WidgetDesc, WidgetHost
from databind.ui.qt_host import QtWidgetHandle, QtWindowHost

__all__ = [
    "Component",
    "HostNotBoundError",
    "Widget",
    "WidgetDesc",
    "WidgetHost",
    "QtWidgetHandle",
    "QtWindowHost",
]
