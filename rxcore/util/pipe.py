"""
Operator composition helpers.

``pipe(f, g, h)`` builds a single function applying ``f``, then ``g``, then
``h``. With no functions it is the identity; with one it is that function.
"""

from functools import reduce
from typing import Any, Callable, Sequence


def identity(x: Any) -> Any:
    return x


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary functions left to right."""
    return pipe_from_iterable(fns)


def pipe_from_iterable(fns: Sequence[Callable[[Any], Any]]) -> Callable[[Any], Any]:
    if len(fns) == 0:
        return identity
    if len(fns) == 1:
        return fns[0]

    def piped(source: Any) -> Any:
        return reduce(lambda prev, fn: fn(prev), fns, source)

    return piped
