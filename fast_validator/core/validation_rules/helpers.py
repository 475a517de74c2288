from __future__ import annotations

from collections.abc import Sized
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from fast_validator.utils.path_resolver import WILDCARD, bind_wildcards, lookup, resolve_all, resolve_first


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized) and not isinstance(value, (bytes, bytearray)):
        return len(value) == 0
    return False


def expand(data: Any, pattern: str) -> Iterator[Tuple[str, bool, Any]]:
    """
    Yield `(attribute, found, value)` for a pattern, reporting missing paths.

    Unlike `resolve_all`, a missing intermediate segment after the last
    wildcard still yields the attribute (with `found=False`), so presence
    rules can flag `address.city` when `address` is absent.
    """
    segments = pattern.split(".")
    if WILDCARD not in segments:
        found, value = lookup(data, pattern)
        yield pattern, found, value
        return

    last = len(segments) - 1 - segments[::-1].index(WILDCARD)
    suffix = ".".join(segments[last + 1:])
    for attribute, item in resolve_all(data, ".".join(segments[: last + 1])):
        if not suffix:
            yield attribute, True, item
            continue
        found, value = lookup(item, suffix)
        yield f"{attribute}.{suffix}", found, value


def other_value(data: Any, pattern: str, attribute: str, other: str) -> Optional[Any]:
    """Value of a related field, with wildcards bound to the current attribute."""
    path = bind_wildcards(pattern, attribute, other)
    if WILDCARD in path.split("."):
        return resolve_first(data, path)
    return lookup(data, path)[1]


def size_of(value: Any) -> Optional[float]:
    """Numbers by value, strings by length, collections by element count."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, Sized):
        return len(value)
    return None


def to_number(parameter: str) -> float:
    number = float(parameter)
    return int(number) if number.is_integer() else number


def numeric_parameters(parameters: Sequence[str], count: int) -> Optional[List[float]]:
    """The first `count` parameters as numbers, or None when missing or not numeric."""
    if len(parameters) < count:
        return None
    try:
        return [to_number(parameter) for parameter in parameters[:count]]
    except ValueError:
        return None
