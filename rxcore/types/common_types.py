"""
rxcore Common Types - Shared Type Definitions
=============================================

Type aliases shared by the core and the operators. Kept in one module so the
core classes can refer to them without importing each other.
"""

from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, Union

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
U = TypeVar("U")

# ============================================================================
# FORWARD REFERENCES
# ============================================================================

if TYPE_CHECKING:
    from ..core.observable import Observable
    from ..core.subscriber import Subscriber
    from ..core.subscription import Subscription

# ============================================================================
# CALLBACK TYPES
# ============================================================================

OnNext = Callable[[T], None]
OnError = Callable[[Any], None]
OnComplete = Callable[[], None]

# Interception callbacks for OperatorSubscriber: each receives the event
# payload plus the downstream Subscriber.
HandleNext = Callable[[Any, "Subscriber[Any]"], None]
HandleError = Callable[[Any, "Subscriber[Any]"], None]
HandleComplete = Callable[["Subscriber[Any]"], None]

# ============================================================================
# TEARDOWN AND PRODUCER TYPES
# ============================================================================

# What a producer may hand back: a no-arg action, another subscription, or
# nothing at all.
TeardownLogic = Optional[Union[Callable[[], None], "Subscription"]]

Producer = Callable[["Subscriber[Any]"], TeardownLogic]

# ============================================================================
# OPERATOR TYPES
# ============================================================================

OperatorFunction = Callable[["Observable[Any]"], "Observable[Any]"]
Projection = Callable[[T], U]
