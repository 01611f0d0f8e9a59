"""Reply normalization helpers shared by every module.

Redis module replies mix flat key/value streams, plain lists and lists of
lists without any type tag, so the shape of a reply decides how it is
collapsed. The rules are applied in order and the first match wins:

1. raw mode returns the reply untouched
2. scalars are returned untouched
3. odd-length (> 1) sequences that are not rectangular stay flat lists
4. empty sequences stay empty
5. single-element sequences unwrap to their normalized element
6. rectangular sequences lose one nesting level and are normalized again
7. everything else is read as ``key, value, key, value, ...`` into a dict
"""

from __future__ import annotations

from typing import Any, Hashable, Mapping, Sequence

_SEQUENCE_TYPES = (list, tuple)
_EMPTY_VALUES = ("", b"")

RawReply = Any
StructuredResult = Any


def normalize_response(response: RawReply, *, raw: bool = False) -> StructuredResult:
    if raw:
        return response
    return _normalize(response)


def _normalize(response: RawReply) -> StructuredResult:
    if not _is_sequence(response):
        return response

    length = len(response)
    if length % 2 == 1 and length > 1 and not is_only_two_dimensional_array(response):
        return response
    if length == 0:
        return response
    if length == 1:
        return _normalize(response[0])
    if is_only_two_dimensional_array(response):
        return _normalize(reduce_array_dimension(response))

    result: dict[Hashable, StructuredResult] = {}
    for idx in range(0, length, 2):
        if idx + 1 >= length:
            break
        value = response[idx + 1]
        if _is_empty(value):
            continue
        key = _as_key(response[idx])
        if _is_sequence(value) and is_only_two_dimensional_array(value):
            result[key] = reduce_array_dimension(value)
            continue
        result[key] = _normalize(value) if _is_sequence(value) else value
    return result


def is_only_two_dimensional_array(array: Sequence[Any]) -> bool:
    """True when every item of ``array`` is itself a sequence (vacuously true when empty)."""
    return all(_is_sequence(item) for item in array)


def reduce_array_dimension(array: Sequence[Sequence[Any]]) -> list[Any]:
    """Concatenate the inner sequences of ``array`` in order."""
    reduced: list[Any] = []
    for inner in array:
        reduced.extend(inner)
    return reduced


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCE_TYPES)


def _is_empty(value: Any) -> bool:
    return isinstance(value, (str, bytes)) and value in _EMPTY_VALUES


def _as_key(key: Any) -> Hashable:
    # Unhashable keys (RESP3 maps and sets included) are frozen.
    if _is_sequence(key):
        return tuple(_as_key(item) for item in key)
    if isinstance(key, Mapping):
        return tuple((_as_key(k), _as_key(v)) for k, v in key.items())
    if isinstance(key, (set, frozenset)):
        return frozenset(key)
    try:
        hash(key)
    except TypeError:
        return repr(key)
    return key


__all__ = [
    "RawReply",
    "StructuredResult",
    "is_only_two_dimensional_array",
    "normalize_response",
    "reduce_array_dimension",
]
