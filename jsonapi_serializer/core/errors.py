"""Exceptions raised while serializing JSON:API documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jsonapi_serializer.config import ResourceConfig


class JSONAPISerializerError(Exception):
    """Base class for serialization failures."""


class MissingIdError(JSONAPISerializerError, KeyError):
    """An object lacked the identifier key configured for its resource type."""

    def __init__(self, id_key: str, value: Any, config: ResourceConfig) -> None:
        super().__init__(id_key)
        self.id_key = id_key
        self.value = value
        self.config = config

    def __str__(self) -> str:
        return f"missing id key {self.id_key!r} for resource type {self.config.type!r}"


class InvalidShapeError(JSONAPISerializerError, TypeError):
    """A value that must be an object was something else."""

    def __init__(self, value: Any, config: ResourceConfig) -> None:
        super().__init__(value)
        self.value = value
        self.config = config

    def __str__(self) -> str:
        return (
            f"expected an object for resource type {self.config.type!r}, "
            f"got {type(self.value).__name__}"
        )
