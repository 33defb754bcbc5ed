"""Serialize JSON objects into JSON:API v1.0 response documents."""

from .config import ResourceConfig
from .core.document import JSONAPIDocumentBuilder
from .core.errors import InvalidShapeError, JSONAPISerializerError, MissingIdError
from .serializers.base import JSONAPISerializer
from .utils.values import JSONRepresentable

__all__ = [
    "InvalidShapeError",
    "JSONAPIDocumentBuilder",
    "JSONAPISerializer",
    "JSONAPISerializerError",
    "JSONRepresentable",
    "MissingIdError",
    "ResourceConfig",
]
