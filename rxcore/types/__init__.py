"""Type aliases and structural protocols shared across rxcore."""

from .common_types import (
    HandleComplete,
    HandleError,
    HandleNext,
    OnComplete,
    OnError,
    OnNext,
    OperatorFunction,
    Producer,
    Projection,
    T,
    TeardownLogic,
    U,
)
from .protocols import Observer, Unsubscribable

__all__ = [
    "T",
    "U",
    "OnNext",
    "OnError",
    "OnComplete",
    "HandleNext",
    "HandleError",
    "HandleComplete",
    "TeardownLogic",
    "Producer",
    "OperatorFunction",
    "Projection",
    "Observer",
    "Unsubscribable",
]
