from __future__ import annotations
from collections.abc import Sequence
from itertools import chain
from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable

S = TypeVar("S")

_MISSING: Any = object()


class NotASemigroup(TypeError):
    def __init__(self, x: Any, y: Any):
        super().__init__(f"cannot append {type(y).__name__} to {type(x).__name__}")
        self.left = x; self.right = y


@runtime_checkable
class Semigroup(Protocol):
    """Error payload that knows how to merge itself with another payload.

    ``append`` must return a new instance and leave both operands untouched.
    """

    def append(self, other: Any) -> Any: ...


def append(x: S, y: S) -> S:
    if isinstance(x, (str, bytes)):
        if type(y) is not type(x): raise NotASemigroup(x, y)
        return x + y  # type: ignore[operator,return-value]
    # Sequences go before Semigroup: list, deque, UserList and bytearray all
    # expose an append() that mutates in place.
    if isinstance(x, Sequence):
        if not isinstance(y, Sequence) or isinstance(y, str): raise NotASemigroup(x, y)
        try:
            return type(x)(chain(x, y))  # type: ignore[return-value,call-arg]
        except TypeError:
            # e.g. range: not constructible from an iterable
            return list(chain(x, y))  # type: ignore[return-value]
    if isinstance(x, Semigroup):
        return x.append(y)
    raise NotASemigroup(x, y)


def combine_all(items: Iterable[S], empty: S = _MISSING) -> S:
    it = iter(items)
    try:
        acc = next(it)
    except StopIteration:
        if empty is _MISSING:
            raise ValueError("combine_all() of an empty iterable with no empty value")
        return empty
    for item in it:
        acc = append(acc, item)
    return acc
