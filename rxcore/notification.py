"""
rxcore Notification - Reified Stream Events
===========================================

A ``Notification`` is an immutable value describing one event of a stream:
a value, an error, or the completion. Notifications are what ``materialize``
emits and what ``dematerialize`` replays.

Exactly one payload is populated, consistent with the kind:

- ``NEXT`` carries ``value``
- ``ERROR`` carries ``error``
- ``COMPLETE`` carries neither

Build them with the factories rather than the constructor:

    next_notification(1)          # Notification(kind='N', value=1)
    error_notification(exc)       # Notification(kind='E', error=exc)
    COMPLETE_NOTIFICATION         # Notification(kind='C'), shared singleton
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional

from .exceptions import NotificationKindError
from .types.common_types import T


class NotificationKind(Enum):
    """Tag of a notification."""

    NEXT = "N"
    ERROR = "E"
    COMPLETE = "C"


@dataclass(frozen=True)
class Notification(Generic[T]):
    """Immutable reified stream event."""

    kind: NotificationKind
    value: Optional[T] = None
    error: Any = None

    def __post_init__(self):
        if self.kind is NotificationKind.NEXT and self.error is not None:
            raise NotificationKindError("NEXT notification cannot carry an error")
        if self.kind is NotificationKind.ERROR and self.value is not None:
            raise NotificationKindError("ERROR notification cannot carry a value")
        if self.kind is NotificationKind.COMPLETE and (
            self.value is not None or self.error is not None
        ):
            raise NotificationKindError("COMPLETE notification carries no payload")

    @property
    def has_value(self) -> bool:
        return self.kind is NotificationKind.NEXT

    def accept(
        self,
        on_next: Callable[[T], Any],
        on_error: Optional[Callable[[Any], Any]] = None,
        on_complete: Optional[Callable[[], Any]] = None,
    ) -> Any:
        """
        Invoke the callback matching this notification's kind.

        Returns whatever the callback returns; a missing callback is a no-op
        returning None.
        """
        if self.kind is NotificationKind.NEXT:
            return on_next(self.value)
        if self.kind is NotificationKind.ERROR:
            return on_error(self.error) if on_error is not None else None
        return on_complete() if on_complete is not None else None

    def observe(self, observer: Any) -> None:
        """
        Replay this notification onto an observer.

        Accepts a ``Subscriber`` (``next``/``error``/``complete``) or any
        object with ``on_next``/``on_error``/``on_complete``.
        """
        if hasattr(observer, "complete"):
            self.accept(observer.next, observer.error, observer.complete)
            return
        self.accept(
            getattr(observer, "on_next", _ignore),
            getattr(observer, "on_error", None),
            getattr(observer, "on_complete", None),
        )

    def __repr__(self) -> str:
        if self.kind is NotificationKind.NEXT:
            return f"Notification(kind='N', value={self.value!r})"
        if self.kind is NotificationKind.ERROR:
            return f"Notification(kind='E', error={self.error!r})"
        return "Notification(kind='C')"


def _ignore(value: Any) -> None:
    pass


def next_notification(value: T) -> Notification[T]:
    """Wrap a value event."""
    return Notification(NotificationKind.NEXT, value=value)


def error_notification(error: Any) -> Notification[Any]:
    """Wrap an error event."""
    return Notification(NotificationKind.ERROR, error=error)


COMPLETE_NOTIFICATION: Notification[Any] = Notification(NotificationKind.COMPLETE)
