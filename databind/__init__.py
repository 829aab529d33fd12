"""
databind - Declarative two-way data binding for PySide6 views.

Connects observable viewmodel properties to view fields from a plain
binding specification, without either side knowing the other's shape.
"""

# Core
from databind.core.config import ConfigManager, AppConfig, BindingSettings, GeneralSettings
from databind.core.logging import setup_logging, NullLog

# Binding
from databind.ui.mvvm import (
    Observable,
    Subscription,
    ToTarget,
    ToSource,
    TwoWay,
    BindingSpecError,
    BindingContext,
    ObjectContext,
    QtWidgetContext,
    Binder,
    BindingSet,
    apply,
    apply_all,
)

# Components
from databind.ui.component import Component, WidgetDesc, HostNotBoundError
from databind.ui.qt_host import QtWindowHost

__version__ = "0.1.0"
