from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Tuple, TypeVar

from .semigroup import append

E = TypeVar("E")
E2 = TypeVar("E2")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class ValidationFailure(Exception, Generic[E]):
    def __init__(self, errors: E):
        super().__init__(repr(errors)); self.errors = errors


class Validated(Generic[E, A]):
    """Either ``Valid(value)`` or ``Invalid(errors)``.

    ``map`` transforms the value of a valid result. ``ap`` applies a validated
    function to a validated argument and, unlike monadic sequencing, merges
    the error payloads of both sides when both are invalid.

    Infix forms follow the usual applicative notation::

        add2 % parse_int("20") * parse_int("22")

    where ``f % v`` lifts ``f`` over ``v`` and ``vf * v`` applies the next
    argument.
    """

    def is_valid(self) -> bool: raise NotImplementedError
    def is_invalid(self) -> bool: return not self.is_valid()

    @staticmethod
    def invalid_one(error: E) -> "Validated[List[E], Any]":
        return Invalid([error])

    def map(self, f: Callable[[A], B]) -> "Validated[E, B]":
        return fmap(self, f)

    def ap(self, vf: "Validated[E, Callable[[A], B]]", *, combine: Callable[[E, E], E] = append) -> "Validated[E, B]":
        return ap(self, vf, combine=combine)

    def map_errors(self, f: Callable[[E], E2]) -> "Validated[E2, A]":
        if self.is_invalid():
            return Invalid(f(self.errors))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def fold(self, on_invalid: Callable[[E], B], on_valid: Callable[[A], B]) -> B:
        if self.is_valid():
            return on_valid(self.value)  # type: ignore[attr-defined]
        return on_invalid(self.errors)  # type: ignore[attr-defined]

    def get(self) -> A:
        if self.is_valid():
            return self.value  # type: ignore[attr-defined]
        raise ValidationFailure(self.errors)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_valid() else default  # type: ignore[attr-defined]

    def combine(self, other: "Validated[E, B]") -> "Validated[E, Tuple[A, B]]":
        return map2(self, other, lambda a, b: (a, b))

    def __rmod__(self, f: Any) -> "Validated[E, Any]":
        # f % v; plain functions have no __mod__ so Python lands here.
        if not callable(f):
            return NotImplemented
        return lift_and_map(f, self)

    def __mul__(self, other: Any) -> "Validated[E, Any]":
        if not isinstance(other, Validated):
            return NotImplemented
        return apply_next(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Valid(Validated[E, A]):
    value: A
    def is_valid(self) -> bool: return True


@dataclass(frozen=True)
class Invalid(Validated[E, A]):
    errors: E
    def is_valid(self) -> bool: return False


def valid(a: A) -> Validated[Any, A]:
    return Valid(a)


def invalid(e: E) -> Validated[E, Any]:
    return Invalid(e)


def _check(v: Any, role: str) -> None:
    if not isinstance(v, Validated):
        raise TypeError(f"{role} must be Valid or Invalid, got {type(v).__name__}")


def fmap(result: Validated[E, A], f: Callable[[A], B]) -> Validated[E, B]:
    _check(result, "result")
    if isinstance(result, Valid):
        return Valid(f(result.value))
    return result  # type: ignore[return-value]


def ap(arg: Validated[E, A], fn: Validated[E, Callable[[A], B]], *, combine: Callable[[E, E], E] = append) -> Validated[E, B]:
    _check(arg, "arg"); _check(fn, "fn")
    match (arg, fn):
        case (Invalid(e1), Invalid(e2)):
            # argument errors come first
            return Invalid(combine(e1, e2))
        case (Invalid(), Valid()):
            return arg  # type: ignore[return-value]
        case (Valid(), Invalid()):
            return fn  # type: ignore[return-value]
        case (Valid(a), Valid(g)):
            return Valid(g(a))
    raise TypeError(f"unsupported Validated variants: {type(arg).__name__}, {type(fn).__name__}")


def lift_and_map(f: Callable[[A], B], x: Validated[E, A]) -> Validated[E, B]:
    return fmap(x, f)


def apply_next(fn_result: Validated[E, Callable[[A], B]], arg_result: Validated[E, A]) -> Validated[E, B]:
    return ap(arg_result, fn_result)


def map2(a: Validated[E, A], b: Validated[E, B], f: Callable[[A, B], C]) -> Validated[E, C]:
    # Left-to-right: a's errors precede b's.
    _check(a, "a"); _check(b, "b")
    if isinstance(a, Valid) and isinstance(b, Valid):
        return Valid(f(a.value, b.value))
    if isinstance(a, Invalid) and isinstance(b, Invalid):
        return Invalid(append(a.errors, b.errors))
    return a if isinstance(a, Invalid) else b  # type: ignore[return-value]
