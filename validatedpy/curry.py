from __future__ import annotations
import inspect
from typing import Any, Callable, Optional

from .validated import Validated, apply_next, lift_and_map


def _required_positional(f: Callable[..., Any]) -> int:
    params = inspect.signature(f).parameters.values()
    return sum(
        1 for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def curry(f: Callable[..., Any], arity: Optional[int] = None) -> Callable[[Any], Any]:
    """Turn ``f(a, b, c)`` into ``f(a)(b)(c)``.

    ``arity`` defaults to the number of required positional parameters. An
    arity of 1 or less returns ``f`` unchanged.
    """
    n = _required_positional(f) if arity is None else arity
    if n <= 1:
        return f

    def step(collected: tuple) -> Callable[[Any], Any]:
        def take(x: Any) -> Any:
            args = collected + (x,)
            if len(args) == n:
                return f(*args)
            return step(args)
        return take

    return step(())


def lift_a(f: Callable[..., Any], *args: Validated[Any, Any]) -> Validated[Any, Any]:
    """Apply an n-ary ``f`` to validated arguments, accumulating all errors.

    Equivalent to ``curry(f) % args[0] * args[1] * ...``, including its error
    order: each later argument's errors are placed ahead of those already
    collected.
    """
    if not args:
        raise TypeError("lift_a() needs at least one validated argument")
    out = lift_and_map(curry(f, len(args)), args[0])
    for a in args[1:]:
        out = apply_next(out, a)
    return out
