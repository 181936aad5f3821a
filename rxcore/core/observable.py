"""
rxcore Observable - Lazy Push-Based Producer
============================================

An ``Observable`` is a recipe, not a running stream. It stores one producer
function ``(subscriber) -> teardown`` and runs it from scratch on every
``subscribe``. Two subscriptions never share state unless the producer
captures it deliberately.

    def producer(subscriber):
        subscriber.next(1)
        subscriber.next(2)
        subscriber.complete()
        return lambda: print("released")

    numbers = Observable(producer)
    subscription = numbers.subscribe(print)

Operators are plain functions ``Observable -> Observable`` chained with
``pipe``:

    numbers.pipe(map(lambda x: x * 10), materialize())
"""

import logging
from typing import Any, Callable, Generic, Optional, Union

from ..config import config
from ..types.common_types import OnComplete, OnError, OnNext, Producer, T
from ..types.protocols import Observer
from ..util.pipe import pipe_from_iterable
from .subscriber import Subscriber
from .subscription import Subscription


class Observable(Generic[T]):
    """
    Lazy, restartable description of a push-based event producer.

    Subscribing runs the producer synchronously with a fresh ``Subscriber``
    and returns that Subscriber as the cancellation handle.
    """

    __slots__ = ("_producer",)

    def __init__(self, producer: Optional[Producer] = None) -> None:
        self._producer = producer

    def subscribe(
        self,
        observer_or_next: Union[Subscriber[Any], Observer[Any], OnNext[Any], None] = None,
        on_error: Optional[OnError] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> Subscription:
        """
        Start the stream.

        Args:
            observer_or_next: A ``Subscriber``, an object with any of
                ``on_next``/``on_error``/``on_complete``, or a value callback
            on_error: Error callback, used when the first argument is a callable
            on_complete: Completion callback, used when the first argument is
                a callable

        Returns:
            Subscription whose ``unsubscribe()`` cancels the stream
        """
        subscriber = to_subscriber(observer_or_next, on_error, on_complete)

        if self._producer is None:
            return subscriber

        try:
            teardown = self._producer(subscriber)
        except Exception as e:
            if not subscriber.is_stopped:
                logging.debug(f"Producer of {self!r} raised {e!r}, routing to error")
                subscriber.error(e)
                return subscriber
            # Already stopped: nothing downstream can take this error.
            logging.debug(f"Producer of {self!r} raised {e!r} after {subscriber!r}")
            if config.on_unhandled_error is None:
                raise
            config.on_unhandled_error(e)
        else:
            subscriber.add(teardown)

        return subscriber

    def pipe(self, *operators: Callable[["Observable[Any]"], "Observable[Any]"]):
        """Apply operators left to right: ``source.pipe(f, g) == g(f(source))``."""
        return pipe_from_iterable(operators)(self)

    def __repr__(self) -> str:
        name = getattr(self._producer, "__qualname__", None)
        return f"Observable({name})" if name else "Observable()"


def to_subscriber(
    observer_or_next: Union[Subscriber[Any], Observer[Any], OnNext[Any], None] = None,
    on_error: Optional[OnError] = None,
    on_complete: Optional[OnComplete] = None,
) -> Subscriber[Any]:
    """
    Normalize any accepted consumer shape into a ``Subscriber``.

    Raises:
        TypeError: If the consumer is neither a Subscriber, an observer
            object, a callable, nor None
    """
    if isinstance(observer_or_next, Subscriber):
        return observer_or_next

    if observer_or_next is None or callable(observer_or_next):
        return Subscriber(observer_or_next, on_error, on_complete)

    if isinstance(observer_or_next, Observer):
        return Subscriber(
            observer_or_next.on_next,
            observer_or_next.on_error,
            observer_or_next.on_complete,
        )

    # Partial observer
    if any(
        hasattr(observer_or_next, name)
        for name in ("on_next", "on_error", "on_complete")
    ):
        return Subscriber(
            getattr(observer_or_next, "on_next", None),
            getattr(observer_or_next, "on_error", None),
            getattr(observer_or_next, "on_complete", None),
        )

    raise TypeError(
        f"Cannot subscribe with {type(observer_or_next).__name__}: expected a "
        "Subscriber, an observer or a callable"
    )
