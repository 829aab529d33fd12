"""
Binding descriptors.

A binding specification maps a viewmodel property name to one of three
directions:

    {
        "count": "label",                               # ToTarget
        "query": {"update": "on_edit"},                 # ToSource
        "title": {"bind": "text", "update": "on_text"}, # TwoWay
    }

``parse_bindings`` turns that raw shape into the typed variants below.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError


class BindingSpecError(ValueError):
    """Raised when a binding descriptor has none of the supported shapes."""


class _BindingBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class ToTarget(_BindingBase):
    """Viewmodel -> view: push the value into field ``bind``."""
    bind: str


class ToSource(_BindingBase):
    """View -> viewmodel: edits on field ``update`` are written to the observable."""
    update: str


class TwoWay(_BindingBase):
    """Both directions. ``bind`` displays the value, ``update`` reports edits."""
    bind: str
    update: str


Binding = Union[ToTarget, ToSource, TwoWay]


def parse_binding(descriptor: Any) -> Binding:
    """
    Convert a raw descriptor into a typed binding.

    Args:
        descriptor: A field name, a mapping with ``update`` (and optionally
            ``bind``), or an already-typed binding.

    Raises:
        BindingSpecError: If the descriptor matches no supported shape.
    """
    if isinstance(descriptor, (ToTarget, ToSource, TwoWay)):
        return descriptor

    if isinstance(descriptor, str):
        return ToTarget(bind=descriptor)

    if isinstance(descriptor, Mapping):
        if "update" not in descriptor:
            raise BindingSpecError(f"Binding descriptor needs an 'update' field: {dict(descriptor)!r}")
        model = TwoWay if "bind" in descriptor else ToSource
        try:
            return model.model_validate(dict(descriptor))
        except ValidationError as e:
            raise BindingSpecError(f"Invalid binding descriptor {dict(descriptor)!r}: {e}") from e

    raise BindingSpecError(f"Unsupported binding descriptor of type '{type(descriptor).__name__}'")


def parse_bindings(bindings: Mapping[str, Any],
                   on_error: Optional[Callable[[str, BindingSpecError], None]] = None) -> Dict[str, Binding]:
    """
    Parse every descriptor of a specification, keeping key order.

    Args:
        bindings: Raw specification.
        on_error: Called with the key and error for each malformed
            descriptor, which is then left out. Without it the first
            malformed descriptor raises.
    """
    parsed: Dict[str, Binding] = {}
    for key, descriptor in bindings.items():
        try:
            parsed[key] = parse_binding(descriptor)
        except BindingSpecError as e:
            error = BindingSpecError(f"'{key}': {e}")
            if on_error is None:
                raise error from e
            on_error(key, error)
    return parsed
