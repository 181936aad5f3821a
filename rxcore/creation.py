"""
rxcore Creation - Observables from plain Python values
======================================================

Small synchronous sources used to start a pipeline:

- ``of(*values)``: emit the arguments, then complete
- ``from_iterable(iterable)``: emit the items of an iterable, then complete
- ``throw_error(error)``: error immediately
- ``empty()`` / ``EMPTY``: complete immediately

All of them stop emitting as soon as the subscriber closes, so a consumer
that unsubscribes from inside its callback receives nothing further.
"""

from typing import Any, Callable, Iterable, Union

from .core.observable import Observable
from .core.subscriber import Subscriber
from .types.common_types import T


def from_iterable(iterable: Iterable[T]) -> Observable[T]:
    """Emit every item of ``iterable`` in order, then complete."""

    def subscribe(subscriber: Subscriber[T]) -> None:
        for item in iterable:
            if subscriber.closed:
                return
            subscriber.next(item)
        subscriber.complete()

    return Observable(subscribe)


def of(*values: T) -> Observable[T]:
    """Emit the given values in order, then complete."""
    return from_iterable(values)


def throw_error(error: Union[BaseException, Callable[[], Any]]) -> Observable[Any]:
    """
    Error every subscriber immediately.

    Pass a callable to build a fresh error per subscription.
    """

    def subscribe(subscriber: Subscriber[Any]) -> None:
        subscriber.error(error() if callable(error) else error)

    return Observable(subscribe)


def empty() -> Observable[Any]:
    """Complete immediately without emitting."""
    return EMPTY


EMPTY: Observable[Any] = Observable(lambda subscriber: subscriber.complete())
