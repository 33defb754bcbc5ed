"""Value model helpers."""

from .values import JSONRepresentable, as_object, freeze, is_array, is_string, shallow_copy, thaw

__all__ = [
    "JSONRepresentable",
    "as_object",
    "freeze",
    "is_array",
    "is_string",
    "shallow_copy",
    "thaw",
]
