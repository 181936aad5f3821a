"""
materialize - Reify stream events as values.
"""

from typing import Any

from ..core.observable import Observable
from ..core.subscriber import Subscriber
from ..notification import (
    COMPLETE_NOTIFICATION,
    Notification,
    error_notification,
    next_notification,
)
from ..types.common_types import OperatorFunction, T
from .operator_subscriber import OperatorSubscriber


def materialize() -> OperatorFunction:
    """
    Represent every event of the source as a ``Notification`` value.

    Each source value ``v`` is emitted as ``next_notification(v)``. When the
    source completes, ``COMPLETE_NOTIFICATION`` is emitted and the output
    completes. When the source errors with ``e``, ``error_notification(e)`` is
    emitted and the output completes normally: the materialized stream never
    ends with an error.

    Example:
        ```python
        letters = of("a", "b", 13, "d")
        upper = letters.pipe(map(lambda x: x.upper()), materialize())
        upper.subscribe(print)

        # Notification(kind='N', value='A')
        # Notification(kind='N', value='B')
        # Notification(kind='E', error=AttributeError(...))
        ```

    Returns:
        An operator producing an Observable of Notifications
    """

    def operator(source: Observable[T]) -> Observable[Notification[T]]:
        def subscribe(subscriber: Subscriber[Notification[T]]) -> None:
            def on_next(value: T, destination: Subscriber[Notification[T]]) -> None:
                destination.next(next_notification(value))

            def on_complete(destination: Subscriber[Notification[T]]) -> None:
                destination.next(COMPLETE_NOTIFICATION)
                destination.complete()

            def on_error(error: Any, destination: Subscriber[Notification[T]]) -> None:
                destination.next(error_notification(error))
                destination.complete()

            source.subscribe(
                OperatorSubscriber(subscriber, on_next, on_complete, on_error)
            )

        return Observable(subscribe)

    return operator
