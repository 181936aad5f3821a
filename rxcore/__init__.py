"""
rxcore - Push-Based Reactive Stream Core

A lazy, cancellable notification pipeline: Observables produce, Subscribers
consume with at most one terminal event, and operators compose the two
without re-implementing subscription bookkeeping.
"""

# Subscription machinery
from .config import RxConfig, config
from .core import Observable, Subscriber, SubscriberState, Subscription

# Sources
from .creation import EMPTY, empty, from_iterable, of, throw_error

# Exceptions
from .exceptions import NotificationKindError, UnsubscriptionError

# Reified events
from .notification import (
    COMPLETE_NOTIFICATION,
    Notification,
    NotificationKind,
    error_notification,
    next_notification,
)

# Composition wrapper consumed by every operator
from .operators.operator_subscriber import (
    OperatorSubscriber,
    create_operator_subscriber,
)
from .util.pipe import pipe

__all__ = [
    # Core
    "Observable",
    "Subscriber",
    "SubscriberState",
    "Subscription",
    # Notifications
    "Notification",
    "NotificationKind",
    "next_notification",
    "error_notification",
    "COMPLETE_NOTIFICATION",
    # Operator support
    "OperatorSubscriber",
    "create_operator_subscriber",
    "pipe",
    # Sources
    "of",
    "from_iterable",
    "throw_error",
    "empty",
    "EMPTY",
    # Configuration
    "config",
    "RxConfig",
    # Exceptions
    "UnsubscriptionError",
    "NotificationKindError",
]
