"""
rxcore Protocols - Structural Interfaces
========================================

Protocol-based interfaces for the objects that cross the ``subscribe``
boundary. Consumers do not need to inherit from anything: any object with the
right methods is accepted, and ``subscribe`` normalizes it into a
``Subscriber``.
"""

from typing import Any, Protocol, runtime_checkable

from .common_types import T


@runtime_checkable
class Observer(Protocol[T]):
    """
    A consumer with the three event callbacks.

    Partial observers (only some of the methods present) are also accepted by
    ``Observable.subscribe``; missing callbacks fall back to the defaults.

    Example:
        ```python
        class Printer:
            def on_next(self, value):
                print("next", value)

            def on_error(self, error):
                print("error", error)

            def on_complete(self):
                print("done")

        of(1, 2).subscribe(Printer())
        ```
    """

    def on_next(self, value: T) -> None: ...

    def on_error(self, error: Any) -> None: ...

    def on_complete(self) -> None: ...


@runtime_checkable
class Unsubscribable(Protocol):
    """Anything that can be cancelled with a no-arg ``unsubscribe()``."""

    def unsubscribe(self) -> None: ...
