from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, List, Optional, Tuple

WILDCARD = "*"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_container(value: Any) -> bool:
    return isinstance(value, Mapping) or _is_sequence(value)


def _children(value: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield str(key), item
    elif _is_sequence(value):
        for idx, item in enumerate(value):
            yield str(idx), item


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _lookup(container: Any, segment: str) -> Tuple[bool, Any]:
    """Return `(found, value)` for a literal segment of a container."""
    if isinstance(container, Mapping):
        if segment in container:
            return True, container[segment]
        # Mappings built from non-string keys (e.g. {0: ...}) are still addressable
        if _is_index(segment) and int(segment) in container:
            return True, container[int(segment)]
        return False, None
    if _is_sequence(container) and _is_index(segment):
        idx = int(segment)
        if idx < len(container):
            return True, container[idx]
    return False, None


def _collate(current: Any, segments: List[str], loc: Tuple[str, ...]) -> Iterator[Tuple[str, Any]]:
    segment, rest = segments[0], segments[1:]

    if segment == WILDCARD:
        for key, item in _children(current):
            if rest:
                yield from _collate(item, rest, loc + (key,))
            else:
                yield ".".join(loc + (key,)), item
        return

    if not _is_container(current):
        return

    found, value = _lookup(current, segment)
    if not rest:
        # Leaf inside an existing container: absence is reported as None
        yield ".".join(loc + (segment,)), value if found else None
        return
    if found:
        yield from _collate(value, rest, loc + (segment,))


def resolve_all(data: Any, pattern: str) -> Iterator[Tuple[str, Any]]:
    """
    Resolve a dotted pattern against nested mappings and sequences.

    Supported syntax:
      - field
      - a.b.c
      - list.0.name
      - list.*.name, map.*, a.*.b.*.c

    Yields `(attribute, value)` pairs lazily, depth first in segment order.
    A missing last segment yields `(attribute, None)`; a missing intermediate
    segment drops the branch. Data must be acyclic.
    """
    if not pattern:
        return iter(())
    return _collate(data, pattern.split("."), tuple())


def flatten(data: Any, prefix: str = "") -> Dict[str, Any]:
    """Flatten nested data into `{dotted.path: leaf}`. Empty containers are leaves."""
    flat: Dict[str, Any] = {}
    for key, value in _children(data):
        path = f"{prefix}.{key}" if prefix else key
        if _is_container(value) and len(value) > 0:
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat


def pattern_to_regex(pattern: str, wildcard: str = "[0-9]+") -> "re.Pattern[str]":
    segments = [wildcard if part == WILDCARD else re.escape(part) for part in pattern.split(".")]
    return re.compile(r"^%s$" % r"\.".join(segments))


def resolve_first(data: Any, pattern: str) -> Optional[Any]:
    """
    Return the first leaf whose full path matches `pattern`, or None.

    Wildcards only match sequence indices here, unlike `resolve_all`.
    """
    regex = pattern_to_regex(pattern)
    for attribute, value in flatten(data).items():
        if regex.match(attribute):
            return value
    return None


def lookup(data: Any, path: str) -> Tuple[bool, Any]:
    """Direct nested lookup of a concrete path. Returns `(found, value)`."""
    current = data
    for segment in path.split(".") if path else []:
        found, current = _lookup(current, segment)
        if not found:
            return False, None
    return True, current


def bind_wildcards(pattern: str, attribute: str, other: str) -> str:
    """
    Fill the wildcards of `other` with the indices `attribute` took for `pattern`.

    `bind_wildcards("users.*.password", "users.3.password", "users.*.confirm")`
    returns `"users.3.confirm"`. Wildcards without a counterpart stay as they are.
    """
    attribute_segments = attribute.split(".")
    bound = [
        attribute_segments[idx]
        for idx, segment in enumerate(pattern.split("."))
        if segment == WILDCARD and idx < len(attribute_segments)
    ]
    segments = other.split(".")
    for idx, segment in enumerate(segments):
        if segment == WILDCARD and bound:
            segments[idx] = bound.pop(0)
    return ".".join(segments)
