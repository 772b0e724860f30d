"""Structural equality over arbitrary values, including cyclic ones."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping, Sequence, Set
from typing import Any

_SCALARS = (str, bytes, bytearray, int, float, complex)

Pair = tuple[Any, Any]


def deep_equal(actual: Any, expected: Any) -> bool:
    """Return True when both values have the same type and the same content.

    Containers, dataclasses and plain objects are compared member by member
    rather than by identity. Values of different types are never equal, so
    ``1`` and ``1.0`` or ``[1]`` and ``(1,)`` differ. The rule also holds
    for dict keys and set members: ``{1: "a"}`` and ``{True: "a"}`` differ.

    Cycles are handled with a set of ``(id(actual), id(expected))`` pairs:
    a pair reached again after it was already taken up counts as equal, so
    two self-referencing structures with the same shape match.

    Pairs are walked with an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.
    """
    # id pair -> the values themselves, keeping them alive so ids stay unique
    seen: dict[tuple[int, int], Pair] = {}
    pending: list[Pair] = [(actual, expected)]
    while pending:
        a, b = pending.pop()
        children = _children(a, b, seen)
        if children is None:
            return False
        pending.extend(reversed(children))
    return True


def _children(a: Any, b: Any, seen: dict[tuple[int, int], Pair]) -> list[Pair] | None:
    """Member pairs still to compare, or None when ``a`` and ``b`` already differ."""
    if a is b:
        return []
    if type(a) is not type(b):
        return None
    if isinstance(a, _SCALARS) or a is None:
        return [] if a == b else None

    key = (id(a), id(b))
    if key in seen:
        return []

    if isinstance(a, Mapping):
        seen[key] = (a, b)
        if len(a) != len(b):
            return None
        b_keys = {(type(k), k): k for k in b}
        pairs = []
        for k, value in a.items():
            b_key = b_keys.get((type(k), k), _MISSING)
            if b_key is _MISSING:
                return None
            pairs.append((value, b[b_key]))
        return pairs

    if isinstance(a, Sequence):
        seen[key] = (a, b)
        if len(a) != len(b):
            return None
        return list(zip(a, b))

    if isinstance(a, Set):
        # members are hashable; pairing them with their type keeps 1 and True apart
        same = {(type(m), m) for m in a} == {(type(m), m) for m in b}
        return [] if same else None

    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        seen[key] = (a, b)
        return [(getattr(a, f.name), getattr(b, f.name)) for f in dataclasses.fields(a)]

    if _is_plain_object(a):
        seen[key] = (a, b)
        attrs_a, attrs_b = _attributes(a), _attributes(b)
        if attrs_a.keys() != attrs_b.keys():
            return None
        return [(attrs_a[name], attrs_b[name]) for name in attrs_a]

    try:
        return [] if bool(a == b) else None
    except (TypeError, ValueError):
        # __eq__ gave something without a single truth value, e.g. an array
        pass
    if isinstance(a, Iterable):
        seen[key] = (a, b)
        items_a, items_b = list(a), list(b)
        if len(items_a) != len(items_b):
            return None
        return list(zip(items_a, items_b))
    return None


class _Missing:
    pass


_MISSING = _Missing()


def _is_plain_object(value: Any) -> bool:
    """Exceptions, and instances of user classes that keep object's identity equality."""
    cls = type(value)
    if cls.__eq__ is not object.__eq__:
        return False
    if isinstance(value, BaseException):
        return True
    if cls.__module__ == "builtins":
        return False
    return hasattr(value, "__dict__") or any("__slots__" in vars(k) for k in cls.__mro__)


def _attributes(value: Any) -> dict[str, Any]:
    attrs: dict[str, Any] = {}
    for klass in type(value).__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if hasattr(value, name):
                attrs[name] = getattr(value, name)
    if hasattr(value, "__dict__"):
        attrs.update(vars(value))
    if isinstance(value, BaseException):
        attrs["args"] = value.args
    return attrs
