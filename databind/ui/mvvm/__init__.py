"""
MVVM Package - declarative data binding between viewmodels and views.

Provides:
- Observable: Value holder with synchronous change notification.
- ToTarget / ToSource / TwoWay: Binding directions.
- Binder: Applies a binding specification to a view context.
- ObjectContext / QtWidgetContext: View contexts for plain objects and PySide6.
"""
from databind.core.observable import Observable, Subscription
from databind.ui.mvvm.bindings import (
    Binding,
    BindingSpecError,
    ToSource,
    ToTarget,
    TwoWay,
    parse_binding,
    parse_bindings,
)
from databind.ui.mvvm.context import BindingContext, ObjectContext, QtWidgetContext
from databind.ui.mvvm.binder import Binder, BindingSet, apply, apply_all

__all__ = [
    # Observables
    "Observable",
    "Subscription",

    # Bindings
    "Binding",
    "BindingSpecError",
    "ToTarget",
    "ToSource",
    "TwoWay",
    "parse_binding",
    "parse_bindings",

    # Contexts
    "BindingContext",
    "ObjectContext",
    "QtWidgetContext",

    # Binder
    "Binder",
    "BindingSet",
    "apply",
    "apply_all",
]
