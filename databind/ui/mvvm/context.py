"""
Binding contexts: the view-facing side of a binding.

The binder only ever calls ``set_field(name, value)``. A plain value is
written for display; a callable passed for an ``update`` field is registered
as that field's change handler, which the view calls on user input.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Tuple, runtime_checkable

from loguru import logger
from PySide6.QtCore import QObject, SignalInstance


@runtime_checkable
class BindingContext(Protocol):
    """Anything that can receive field values and change handlers."""

    def set_field(self, name: str, value: Any) -> None:
        ...


class ObjectContext:
    """
    Context over an arbitrary Python object.

    Fields are attributes: values and handlers are both assigned with
    ``setattr``, so a view calls ``self.on_edit(new_value)`` to report input.
    """

    def __init__(self, view: Any):
        self.view = view

    def set_field(self, name: str, value: Any) -> None:
        setattr(self.view, name, value)


class QtWidgetContext:
    """
    Context over PySide6 objects.

    Args:
        fields: Maps a field name to ``(qobject, member)``. When ``member`` is
            a Qt signal, the field is a write channel and its handler is
            connected to the signal; otherwise ``member`` must be a declared
            Qt property, written with ``setProperty``.

    Example:
        context = QtWidgetContext({
            "title": (label, "text"),
            "edited": (line_edit, "textEdited"),
        })
    """

    def __init__(self, fields: Mapping[str, Tuple[QObject, str]]):
        self._fields: Dict[str, Tuple[QObject, str]] = dict(fields)
        self._handlers: Dict[str, Callable] = {}

    def set_field(self, name: str, value: Any) -> None:
        if name not in self._fields:
            raise KeyError(f"No widget field named '{name}'")

        target, member = self._fields[name]
        signal = getattr(target, member, None)

        if isinstance(signal, SignalInstance):
            if not callable(value):
                raise TypeError(f"Field '{name}' is a signal and needs a callable, got '{type(value).__name__}'")
            self._connect(name, signal, value)
            return

        if target.metaObject().indexOfProperty(member) < 0:
            raise KeyError(f"Field '{name}' maps to '{member}', which is neither a signal nor a property of {type(target).__name__}")
        target.setProperty(member, value)

    def handler(self, name: str) -> Optional[Callable]:
        """The handler currently connected to ``name``, if any."""
        return self._handlers.get(name)

    def _connect(self, name: str, signal: SignalInstance, handler: Callable) -> None:
        previous = self._handlers.get(name)
        if previous is not None:
            signal.disconnect(previous)
        signal.connect(handler)
        self._handlers[name] = handler
        logger.debug(f"Connected handler for field '{name}'")
