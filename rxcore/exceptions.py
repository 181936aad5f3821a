"""
rxcore Exceptions
=================

Exceptions raised by the subscription machinery.

Stream errors themselves are never wrapped: whatever a producer passes to
``Subscriber.error`` reaches the consumer unchanged. The classes here cover
failures of the bookkeeping around a stream.
"""

from typing import Iterable, List


class UnsubscriptionError(Exception):
    """Raised when one or more teardowns fail during unsubscription."""

    def __init__(self, errors: Iterable[BaseException]):
        self.errors: List[BaseException] = list(errors)
        summary = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(
            f"{len(self.errors)} error(s) occurred during unsubscription: {summary}"
        )


class NotificationKindError(ValueError):
    """Notification payload does not match its kind."""

    pass
