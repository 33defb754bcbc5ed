"""Core JSON:API document and error helpers."""

from .document import JSONAPI_VERSION, JSONAPIDocumentBuilder
from .errors import InvalidShapeError, JSONAPISerializerError, MissingIdError

__all__ = [
    "JSONAPI_VERSION",
    "JSONAPIDocumentBuilder",
    "InvalidShapeError",
    "JSONAPISerializerError",
    "MissingIdError",
]
