from __future__ import annotations
from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from .semigroup import append
from .validated import Invalid, Valid, Validated

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


def sequence(items: Iterable[Validated[E, A]]) -> Validated[E, List[A]]:
    """Collect valid values into a list, or every error payload in input order."""
    values: List[A] = []
    errors: Any = None
    failed = False
    for v in items:
        if isinstance(v, Valid):
            values.append(v.value)
        elif isinstance(v, Invalid):
            errors = v.errors if not failed else append(errors, v.errors)
            failed = True
        else:
            raise TypeError(f"sequence() items must be Valid or Invalid, got {type(v).__name__}")
    if failed:
        return Invalid(errors)
    return Valid(values)


def traverse(items: Iterable[A], f: Callable[[A], Validated[E, B]]) -> Validated[E, List[B]]:
    return sequence(f(x) for x in items)


def partition(items: Iterable[Validated[E, A]]) -> Tuple[List[A], List[E]]:
    values: List[A] = []
    errors: List[E] = []
    for v in items:
        if isinstance(v, Valid):
            values.append(v.value)
        elif isinstance(v, Invalid):
            errors.append(v.errors)
        else:
            raise TypeError(f"partition() items must be Valid or Invalid, got {type(v).__name__}")
    return values, errors
