from .path_resolver import flatten, resolve_all, resolve_first
from .serialisation import pretty_attribute

__all__ = [
    "flatten",
    "resolve_all",
    "resolve_first",
    "pretty_attribute",
]
