"""
map - Project each source value.
"""

from ..core.observable import Observable
from ..core.subscriber import Subscriber
from ..types.common_types import OperatorFunction, Projection, T, U
from .operator_subscriber import OperatorSubscriber


def map(project: Projection[T, U]) -> OperatorFunction:
    """
    Emit ``project(value)`` for every source value.

    If ``project`` raises, the exception becomes the output's error and the
    source is cancelled. Failures raised downstream while receiving the
    projected value are not intercepted.

    Args:
        project: Function applied to each value

    Returns:
        An operator producing the projected Observable
    """

    def operator(source: Observable[T]) -> Observable[U]:
        def subscribe(subscriber: Subscriber[U]) -> None:
            def on_next(value: T, destination: Subscriber[U]) -> None:
                try:
                    result = project(value)
                except Exception as e:
                    destination.error(e)
                    return
                destination.next(result)

            source.subscribe(OperatorSubscriber(subscriber, on_next))

        return Observable(subscribe)

    return operator
