"""
Binder - wires viewmodel observables to view fields.

Usage:
    class CounterViewModel:
        def __init__(self):
            self.count = Observable(0)
            self.query = Observable("")

    binder = Binder()
    binder.apply(context, CounterViewModel(), {
        "count": "label",              # viewmodel -> view
        "query": {"update": "edited"}, # view -> viewmodel
    })

Keys that resolve to nothing are reported as warnings and skipped; the rest
of the specification is still applied.
"""
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Union

from databind.core.config import BindingSettings, ConfigManager
from databind.core.logging import Log, component_log
from databind.ui.mvvm.bindings import Binding, BindingSpecError, ToSource, ToTarget, TwoWay, parse_bindings
from databind.ui.mvvm.context import BindingContext
from databind.core.observable import Observable, Subscription


class BindingSet:
    """Subscriptions created by one ``apply``/``apply_all`` call."""

    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self.bound_keys: List[str] = []

    def add(self, subscription: Subscription) -> None:
        self._subscriptions.append(subscription)

    def dispose(self) -> None:
        """Stop pushing viewmodel changes to the view."""
        for subscription in self._subscriptions:
            subscription.dispose()
        self._subscriptions.clear()

    def __iter__(self) -> Iterator[Subscription]:
        return iter(self._subscriptions)

    def __len__(self) -> int:
        return len(self._subscriptions)


class _FeedbackGuard:
    """Tracks the value a binding is currently pushing into its target field."""

    _IDLE = object()

    def __init__(self):
        self.pushing = self._IDLE

    def is_echo(self, value: Any) -> bool:
        return self.pushing is not self._IDLE and value == self.pushing


class Binder:
    """
    Binds a view context to one or more viewmodels.

    Args:
        log: A ``Log``. Defaults to the loguru logger bound to
            ``component="binder"``.
        guard_feedback: Drop write-channel calls that echo the value the same
            binding is pushing into its target field. Different values (a
            widget clamping its input, for instance) still write through.
        warn_unresolved: Report unresolved keys as warnings (otherwise debug).
    """

    def __init__(self, log: Optional[Log] = None, guard_feedback: bool = True, warn_unresolved: bool = True):
        self.log = log if log is not None else component_log("binder")
        self.guard_feedback = guard_feedback
        self.warn_unresolved = warn_unresolved

    @classmethod
    def from_config(cls, config: Union[BindingSettings, ConfigManager], log: Optional[Log] = None) -> "Binder":
        """
        Build a binder from binding settings.

        Given a ``ConfigManager``, the binder also follows later updates of
        the ``binding`` section.
        """
        binder = cls(log=log)
        if isinstance(config, ConfigManager):
            binder.configure(config.data.binding)
            config.settings.subscribe(lambda app_config: binder.configure(app_config.binding))
        else:
            binder.configure(config)
        return binder

    def configure(self, settings: BindingSettings) -> None:
        self.guard_feedback = settings.guard_feedback
        self.warn_unresolved = settings.warn_unresolved

    def apply(self, context: BindingContext, viewmodel: Any, bindings: Mapping[str, Any]) -> BindingSet:
        """
        Binds a view context to a viewmodel through selected bindings.

        Args:
            context: The context of the view (target).
            viewmodel: The viewmodel (source) to bind to.
            bindings: The properties to bind to.
        """
        parsed = parse_bindings(bindings, on_error=self._malformed)
        result = BindingSet()
        for key, binding in parsed.items():
            if self._apply_binding(context, viewmodel, key, binding, result):
                result.bound_keys.append(key)
            else:
                self._unresolved(f"Could not find observable property on viewmodel for '{key}'")
        return result

    def apply_all(self, context: BindingContext, viewmodels: Iterable[Any], bindings: Mapping[str, Any]) -> BindingSet:
        """
        Binds a view context to multiple viewmodels through selected bindings.

        Every viewmodel exposing a key gets its own binding; a key is only
        reported when no viewmodel resolves it.
        """
        parsed = parse_bindings(bindings, on_error=self._malformed)
        viewmodels = list(viewmodels)
        result = BindingSet()
        for key, binding in parsed.items():
            success = False
            for viewmodel in viewmodels:
                success = self._apply_binding(context, viewmodel, key, binding, result) or success

            if success:
                result.bound_keys.append(key)
            else:
                self._unresolved(f"Could not find observable property on any viewmodels for '{key}'")
        return result

    def _malformed(self, key: str, error: BindingSpecError) -> None:
        self.log.warning(f"Skipped malformed binding {error}")

    def _unresolved(self, message: str) -> None:
        if self.warn_unresolved:
            self.log.warning(message)
        else:
            self.log.debug(message)

    def _apply_binding(self, context: BindingContext, viewmodel: Any, key: str,
                       binding: Binding, result: BindingSet) -> bool:
        """Returns False when ``key`` does not name an observable on ``viewmodel``."""
        observable = _resolve(viewmodel, key)
        if observable is _MISSING:
            return False
        if not isinstance(observable, Observable):
            self.log.debug(f"Binding failed: '{key}' is not an observable, but of type '{type(observable).__name__}'")
            return False

        guard = _FeedbackGuard()

        if isinstance(binding, ToTarget):
            result.add(self._bind_target(context, observable, binding.bind, guard))
            self.log.debug(f"Binding created: '{key}' -> '{binding.bind}'")
        elif isinstance(binding, ToSource):
            self._bind_source(context, observable, key, binding.update, guard)
            self.log.debug(f"Binding created: '{key}' <- '{binding.update}'")
        elif isinstance(binding, TwoWay):
            self._bind_source(context, observable, key, binding.update, guard)
            result.add(self._bind_target(context, observable, binding.bind, guard))
            self.log.debug(f"Binding created: '{key}' <-> '{binding.bind}:{binding.update}'")
        else:
            raise TypeError(f"Unknown binding type '{type(binding).__name__}'")
        return True

    def _bind_target(self, context: BindingContext, observable: Observable,
                     field: str, guard: _FeedbackGuard) -> Subscription:
        def push(value):
            previous = guard.pushing
            guard.pushing = value
            try:
                context.set_field(field, value)
            finally:
                guard.pushing = previous

        push(observable.get())
        return observable.subscribe(push)

    def _bind_source(self, context: BindingContext, observable: Observable, key: str,
                     field: str, guard: _FeedbackGuard) -> None:
        def update(value):
            if self.guard_feedback and guard.is_echo(value):
                self.log.debug(f"Ignored echo of '{key}' from '{field}'")
                return
            observable.set(value)

        context.set_field(field, update)


_MISSING = object()


def _resolve(viewmodel: Any, key: str) -> Any:
    if isinstance(viewmodel, Mapping):
        return viewmodel.get(key, _MISSING)
    return getattr(viewmodel, key, _MISSING)


_default_binder = Binder()


def apply(context: BindingContext, viewmodel: Any, bindings: Mapping[str, Any]) -> BindingSet:
    """``Binder.apply`` on the shared default binder."""
    return _default_binder.apply(context, viewmodel, bindings)


def apply_all(context: BindingContext, viewmodels: Iterable[Any], bindings: Mapping[str, Any]) -> BindingSet:
    """``Binder.apply_all`` on the shared default binder."""
    return _default_binder.apply_all(context, viewmodels, bindings)
