"""Adapt caller values to the JSON value model used by the serializer.

The serializer only needs to tell objects from arrays from scalars, so the
helpers here answer those questions and convert richer inputs (pydantic
models, SQLAlchemy mapped instances, objects with a ``to_json`` hook) into
plain mappings.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import InstanceState
from sqlalchemy.orm.attributes import NO_VALUE


@runtime_checkable
class JSONRepresentable(Protocol):
    """Anything that can present itself as a JSON object."""

    def to_json(self) -> Mapping[str, Any]:
        ...


def as_object(value: Any) -> Mapping[str, Any] | None:
    """Return ``value`` as a string-keyed mapping, or None if it is not an object."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, JSONRepresentable):
        converted = value.to_json()
        return converted if isinstance(converted, Mapping) else None
    return _mapped_attributes(value)


def is_array(value: Any) -> bool:
    """Return True for ordered sequences (never strings or bytes)."""
    return isinstance(value, (list, tuple))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def _mapped_attributes(instance: Any) -> dict[str, Any] | None:
    state = inspect(instance, raiseerr=False)
    if not isinstance(state, InstanceState):
        return None
    # Unloaded attributes would trigger lazy loads; only what is present is read.
    return {
        attr.key: attr.loaded_value
        for attr in state.attrs
        if attr.loaded_value is not NO_VALUE
    }


def shallow_copy(value: Any) -> Any:
    """Copy the top level of an object or array; scalars are returned as-is."""
    if isinstance(value, Mapping):
        return dict(value)
    if is_array(value):
        return list(value)
    return value


def freeze(value: Any) -> Any:
    """Return a read-only deep copy: objects become mapping proxies, arrays tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if is_array(value):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a mutable deep copy: objects become dicts, arrays lists."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if is_array(value):
        return [thaw(item) for item in value]
    return value
