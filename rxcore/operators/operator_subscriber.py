"""
rxcore OperatorSubscriber - Composition Wrapper for Operators
=============================================================

Every operator is built the same way: it subscribes to its source with an
``OperatorSubscriber`` bound to the downstream Subscriber. The wrapper hands
each intercepted event to an operator-supplied handler together with the
downstream Subscriber, and the handler decides what, if anything, to forward.

Omitted handlers forward the event unchanged.

Because the wrapper is itself a ``Subscriber``, its termination state is
tracked once, centrally. The downstream Subscriber enforces the same contract,
so no handler can produce two terminal events downstream.

Cancellation cascades upstream: the wrapper registers itself as a teardown of
the downstream Subscriber, so cancelling (or terminating) downstream tears
down the source subscription as well.
"""

from typing import Any, Callable, Optional

from ..core.subscriber import Subscriber
from ..types.common_types import HandleComplete, HandleError, HandleNext, T


class OperatorSubscriber(Subscriber[T]):
    """
    Upstream Subscriber that routes events through operator handlers.

    Args:
        destination: The downstream Subscriber
        on_next: ``(value, destination)``, replaces forwarding of values
        on_complete: ``(destination)``, replaces forwarding of completion
        on_error: ``(error, destination)``, replaces forwarding of errors
        on_finalize: Called once when this subscriber tears down, whether by
            termination or cancellation
    """

    def __init__(
        self,
        destination: Subscriber[Any],
        on_next: Optional[HandleNext] = None,
        on_complete: Optional[HandleComplete] = None,
        on_error: Optional[HandleError] = None,
        on_finalize: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self._destination = destination
        self._handle_next = on_next
        self._handle_complete = on_complete
        self._handle_error = on_error
        self._on_finalize = on_finalize
        destination.add(self)

    @property
    def destination(self) -> Optional[Subscriber[Any]]:
        """The downstream Subscriber, or None once this wrapper tore down."""
        return self._destination

    def _next(self, value: T) -> None:
        if self._handle_next is not None:
            self._handle_next(value, self._destination)
        else:
            self._destination.next(value)

    def _error(self, err: Any) -> None:
        if self._handle_error is not None:
            self._handle_error(err, self._destination)
        else:
            self._destination.error(err)

    def _complete(self) -> None:
        if self._handle_complete is not None:
            self._handle_complete(self._destination)
        else:
            self._destination.complete()

    def unsubscribe(self) -> None:
        if self._closed:
            return
        destination, on_finalize = self._destination, self._on_finalize
        # A torn-down wrapper still held upstream must not pin the consumer.
        self._destination = None
        self._on_finalize = None
        try:
            super().unsubscribe()
        finally:
            destination.remove(self)
            if on_finalize is not None:
                on_finalize()

    def _release(self) -> None:
        self._handle_next = None
        self._handle_complete = None
        self._handle_error = None

    def __repr__(self) -> str:
        return f"OperatorSubscriber({self._state.value} -> {self._destination!r})"


def create_operator_subscriber(
    destination: Subscriber[Any],
    on_next: Optional[HandleNext] = None,
    on_complete: Optional[HandleComplete] = None,
    on_error: Optional[HandleError] = None,
    on_finalize: Optional[Callable[[], None]] = None,
) -> OperatorSubscriber[Any]:
    """Functional constructor for ``OperatorSubscriber``."""
    return OperatorSubscriber(destination, on_next, on_complete, on_error, on_finalize)
