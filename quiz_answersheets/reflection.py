"""
Read access to non-public attributes of host objects.

Some host objects keep state we need (e.g. a question usage) in protected or
private attributes without an accessor. ``read_hidden_field`` reads it
directly; ``HiddenFieldAdapter`` narrows that access to a declared set of names.
"""

from __future__ import annotations

from types import MemberDescriptorType
from typing import Any

from .exceptions import HiddenFieldError

_MISSING = object()


def _candidate_names(obj: Any, field_name: str) -> list[str]:
    bare = field_name.lstrip("_")
    names = [field_name, f"_{bare}"]
    # Class-private names are mangled with the defining class, anywhere in the MRO
    for klass in type(obj).__mro__:
        names.append(f"_{klass.__name__.lstrip('_')}__{bare}")
    return list(dict.fromkeys(names))


def read_hidden_field(obj: Any, field_name: str) -> Any:
    """
    Get the value of a protected or private attribute.

    Instance attributes are read from ``__dict__`` so properties and
    ``__getattr__`` hooks are bypassed; class attributes are looked up along the MRO.

    Args:
        obj: Object holding the attribute
        field_name: Attribute name, with or without leading underscores

    Returns:
        The stored value

    Raises:
        HiddenFieldError: No attribute of that name exists
    """
    instance_dict = getattr(obj, "__dict__", {})
    owner = type(obj)
    for name in _candidate_names(obj, field_name):
        value = instance_dict.get(name, _MISSING)
        if value is not _MISSING:
            return value
        for klass in owner.__mro__:
            if name not in klass.__dict__:
                continue
            value = klass.__dict__[name]
            if isinstance(value, MemberDescriptorType):  # __slots__ entry
                try:
                    return value.__get__(obj, owner)
                except AttributeError:
                    break
            if hasattr(value, "__get__"):
                break  # Methods, properties and other descriptors are not fields
            return value
    raise HiddenFieldError(f"{type(obj).__name__} has no field {field_name!r}")


class HiddenFieldAdapter:
    """Read-only view exposing selected hidden fields of a wrapped object."""

    def __init__(self, wrapped: Any, fields: tuple[str, ...]):
        self._wrapped = wrapped
        self._fields = frozenset(fields)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name not in self._fields:
            raise AttributeError(name)
        return read_hidden_field(self._wrapped, name)
