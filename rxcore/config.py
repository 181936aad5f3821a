"""
rxcore Configuration
====================

Library-wide hooks for events the subscription machinery cannot deliver
anywhere else. The module exposes a single ``config`` instance; assign to its
attributes to install a hook:

    from rxcore import config

    config.on_unhandled_error = lambda err: log.warning("lost %r", err)
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Optional


@dataclass
class RxConfig:
    """Hooks consulted by ``Subscriber``."""

    # Receives errors delivered to a Subscriber created without an error
    # handler. When unset, the error is re-raised to the producer.
    on_unhandled_error: Optional[Callable[[Any], None]] = None

    # Receives (notification, subscriber) for calls made after the
    # Subscriber stopped.
    on_stopped_notification: Optional[Callable[[Any, Any], None]] = None

    def reset(self) -> None:
        """Restore every hook to its default."""
        for f in fields(self):
            setattr(self, f.name, f.default)


config = RxConfig()
