"""
Component - binds a widget description to a host window.

A component does not own its host. ``bind`` attaches (or swaps) the host and
refreshes the widget; until then every widget lookup fails with
``HostNotBoundError``.
"""
from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from databind.core.logging import Log, component_log


class HostNotBoundError(RuntimeError):
    """Raised when a component's widget is accessed before ``bind``."""


class WidgetDesc(BaseModel):
    """Identity of a widget on its host window."""
    model_config = ConfigDict(frozen=True)

    name: str


@runtime_checkable
class Widget(Protocol):
    is_disabled: bool


@runtime_checkable
class WidgetHost(Protocol):
    def find_widget(self, name: str) -> Widget:
        """Return the widget called ``name``; raise if there is none."""
        ...


class Component(ABC):
    """
    Base class for managing and binding a widget controller to a window.

    Subclasses implement ``refresh_widget`` to re-apply whatever the
    description drives on the widget.
    """

    def __init__(self, description: WidgetDesc, log: Optional[Log] = None):
        self._description = description
        self._host: Optional[WidgetHost] = None
        self.log = log if log is not None else component_log(type(self).__name__)

    @property
    def description(self) -> WidgetDesc:
        return self._description

    @property
    def host(self) -> Optional[WidgetHost]:
        return self._host

    @property
    def is_bound(self) -> bool:
        return self._host is not None

    def bind(self, host: WidgetHost) -> None:
        """Binds the window of this component and refreshes its widget."""
        self._host = host
        self.log.debug(f"Component '{self._description.name}' bound to {type(host).__name__}")
        self.refresh()

    def active(self, toggle: bool) -> None:
        """
        Toggles whether the component is currently active.

        Args:
            toggle: True if active, or False if disabled.
        """
        widget = self.get_widget()
        widget.is_disabled = not toggle

        self.refresh_widget(widget)

    def refresh(self) -> None:
        """Refreshes the widget related to this component."""
        widget = self.get_widget()
        self.refresh_widget(widget)

    @abstractmethod
    def refresh_widget(self, widget: Widget) -> None:
        """Updates the widget with the appropriate values."""

    def get_widget(self) -> Widget:
        """Gets the underlying widget from the attached window."""
        if self._host is None:
            raise HostNotBoundError(f"Component '{self._description.name}' has no host window bound")

        return self._host.find_widget(self._description.name)
