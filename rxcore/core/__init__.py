"""
rxcore Core - Subscription Machinery
====================================

The three classes every operator is built on:

- ``Subscription``: idempotent, single-fire teardown container
- ``Subscriber``: consumer handle enforcing at most one terminal event
- ``Observable``: lazy, restartable producer description
"""

from .observable import Observable, to_subscriber
from .subscriber import Subscriber, SubscriberState
from .subscription import Subscription

__all__ = [
    "Observable",
    "Subscriber",
    "SubscriberState",
    "Subscription",
    "to_subscriber",
]
