"""
dematerialize - Replay Notification values as stream events.
"""

from typing import Any

from ..core.observable import Observable
from ..core.subscriber import Subscriber
from ..notification import Notification
from ..types.common_types import OperatorFunction, T
from .operator_subscriber import OperatorSubscriber


def dematerialize() -> OperatorFunction:
    """
    Inverse of ``materialize``: turn Notification values back into events.

    A NEXT notification is emitted as its value, an ERROR notification errors
    the output, and a COMPLETE notification completes it. Anything that is
    not a ``Notification`` errors the output with ``TypeError``.
    """

    def operator(source: Observable[Notification[T]]) -> Observable[T]:
        def subscribe(subscriber: Subscriber[T]) -> None:
            def on_next(notification: Any, destination: Subscriber[T]) -> None:
                if not isinstance(notification, Notification):
                    destination.error(
                        TypeError(
                            f"dematerialize expected a Notification, got {type(notification).__name__}"
                        )
                    )
                    return
                notification.observe(destination)

            source.subscribe(OperatorSubscriber(subscriber, on_next))

        return Observable(subscribe)

    return operator
