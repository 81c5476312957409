"""Adapters from ordinary Python parsers and predicates to ``Validated``.

Parsers in the standard library signal bad input by raising (``int("x")``
raises ``ValueError``). These helpers catch that and hand back an ``Invalid``
so the result can take part in error accumulation.
"""
from __future__ import annotations
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .logger import ConsoleLogger, get_logger
from .validated import Invalid, Valid, Validated

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


def attempt(thunk: Callable[[], A], on_error: Callable[[Exception], E],
            logger: Optional[ConsoleLogger] = None) -> Validated[E, A]:
    try:
        return Valid(thunk())
    except Exception as ex:
        (logger or get_logger()).debug("validation rejected input", exc=type(ex).__name__)
        return Invalid(on_error(ex))


def validator(on_error: Callable[[Any, Exception], E],
              logger: Optional[ConsoleLogger] = None) -> Callable[[Callable[[Any], A]], Callable[[Any], Validated[E, A]]]:
    """Decorate a raising one-argument parser into a ``Validated`` producer.

    ``on_error`` receives the raw input and the exception::

        @validator(lambda s, _: [f"{s} is not an integer"])
        def parse_int(s):
            return int(s)
    """
    def deco(parse: Callable[[Any], A]) -> Callable[[Any], Validated[E, A]]:
        @wraps(parse)
        def run(raw: Any) -> Validated[E, A]:
            return attempt(lambda: parse(raw), lambda ex: on_error(raw, ex), logger)
        return run
    return deco


def ensure(pred: Callable[[A], bool], on_error: Callable[[A], E]) -> Callable[[A], Validated[E, A]]:
    def run(x: A) -> Validated[E, A]:
        return Valid(x) if pred(x) else Invalid(on_error(x))
    return run
