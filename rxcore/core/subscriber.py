"""
rxcore Subscriber - Terminal-State Enforcing Consumer
=====================================================

A ``Subscriber`` wraps a consumer's three callbacks and guarantees the stream
contract on their behalf:

- any number of ``next`` calls, then at most one of ``error``/``complete``
- nothing is delivered after a terminal event or after cancellation
- teardown runs exactly once, on termination or on ``unsubscribe()``

The state moves from ``ACTIVE`` to exactly one of ``ERRORED``, ``COMPLETED``
or ``CANCELLED`` and never back. The transition happens before the consumer
callback runs, so a callback that re-enters the Subscriber sees it stopped.

Callback failures are not caught here. They propagate to whoever called
``next``/``error``/``complete``; deciding what to do with them is the
producer's or operator's business.
"""

import logging
from enum import Enum
from typing import Any, Generic, Optional

from ..config import config
from ..notification import (
    COMPLETE_NOTIFICATION,
    Notification,
    error_notification,
    next_notification,
)
from ..types.common_types import OnComplete, OnError, OnNext, T
from .subscription import Subscription


class SubscriberState(Enum):
    """Lifecycle of a Subscriber."""

    ACTIVE = "active"
    ERRORED = "errored"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Subscriber(Subscription, Generic[T]):
    """
    Consumer handle delivering a stream to three callbacks.

    Subclasses customize delivery by overriding ``_next``, ``_error`` and
    ``_complete``; the public methods own the state machine and must not be
    overridden.

    Example:
        ```python
        received = []
        subscriber = Subscriber(received.append)

        subscriber.next(1)
        subscriber.complete()
        subscriber.next(2)  # dropped

        assert received == [1]
        ```
    """

    def __init__(
        self,
        on_next: Optional[OnNext[T]] = None,
        on_error: Optional[OnError] = None,
        on_complete: Optional[OnComplete] = None,
    ) -> None:
        super().__init__()
        self._state = SubscriberState.ACTIVE
        self._on_next = on_next if on_next is not None else _noop_next
        self._on_error = on_error if on_error is not None else _default_error
        self._on_complete = on_complete if on_complete is not None else _noop

    @property
    def state(self) -> SubscriberState:
        return self._state

    @property
    def is_stopped(self) -> bool:
        """True once a terminal event was accepted or the Subscriber was cancelled."""
        return self._state is not SubscriberState.ACTIVE

    @property
    def closed(self) -> bool:
        # Producers poll this to stop emitting early.
        return self._state is not SubscriberState.ACTIVE or self._closed

    def next(self, value: T) -> None:
        """Deliver a value unless the Subscriber has stopped."""
        if self._state is not SubscriberState.ACTIVE:
            self._stopped_notification(next_notification(value))
            return
        self._next(value)

    def error(self, err: Any) -> None:
        """Deliver a terminal error, then tear down."""
        if self._state is not SubscriberState.ACTIVE:
            self._stopped_notification(error_notification(err))
            return
        self._state = SubscriberState.ERRORED
        try:
            self._error(err)
        finally:
            self.unsubscribe()

    def complete(self) -> None:
        """Deliver normal completion, then tear down."""
        if self._state is not SubscriberState.ACTIVE:
            self._stopped_notification(COMPLETE_NOTIFICATION)
            return
        self._state = SubscriberState.COMPLETED
        try:
            self._complete()
        finally:
            self.unsubscribe()

    def unsubscribe(self) -> None:
        """Cancel delivery and run the teardown once."""
        if self._state is SubscriberState.ACTIVE:
            self._state = SubscriberState.CANCELLED
        if self._closed:
            return
        try:
            super().unsubscribe()
        finally:
            self._release()

    # Delivery hooks
    def _next(self, value: T) -> None:
        self._on_next(value)

    def _error(self, err: Any) -> None:
        self._on_error(err)

    def _complete(self) -> None:
        self._on_complete()

    def _release(self) -> None:
        # Drop consumer references so a finished subscription holds nothing.
        self._on_next = _noop_next
        self._on_error = _noop_next
        self._on_complete = _noop

    def _stopped_notification(self, notification: Notification[Any]) -> None:
        logging.debug(
            f"Dropped {notification!r}: subscriber is {self._state.value}"
        )
        if config.on_stopped_notification is not None:
            config.on_stopped_notification(notification, self)

    def __repr__(self) -> str:
        return f"Subscriber({self._state.value})"


def _noop() -> None:
    pass


def _noop_next(value: Any) -> None:
    pass


def _default_error(err: Any) -> None:
    if config.on_unhandled_error is not None:
        config.on_unhandled_error(err)
        return
    if isinstance(err, BaseException):
        raise err
    raise RuntimeError(f"Unhandled stream error: {err!r}")
