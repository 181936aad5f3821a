"""
rxcore Subscription - Idempotent Teardown Container
===================================================

A ``Subscription`` is the cancellation handle handed back by
``Observable.subscribe``. It owns a list of teardowns and runs each of them
exactly once, the first time ``unsubscribe()`` is called. Later calls do
nothing.

Teardowns may be:

- a no-arg callable
- another ``Subscription`` (its ``unsubscribe`` is called)
- any object with an ``unsubscribe()`` method
- ``None`` (ignored)

Adding a teardown to an already closed subscription runs it immediately, so a
producer that finishes synchronously and then returns its teardown still has
it executed.
"""

import logging
from typing import Any, List

from ..exceptions import UnsubscriptionError
from ..types.common_types import TeardownLogic
from ..types.protocols import Unsubscribable


class Subscription:
    """Cancellation handle running its teardowns exactly once."""

    def __init__(self, initial_teardown: TeardownLogic = None) -> None:
        self._closed = False
        self._finalizers: List[Any] = []
        if initial_teardown is not None:
            self.add(initial_teardown)

    @property
    def closed(self) -> bool:
        """True once ``unsubscribe()`` has run."""
        return self._closed

    def add(self, teardown: TeardownLogic) -> None:
        """Register a teardown, or run it now if already closed."""
        if teardown is None or teardown is self:
            return
        _check_teardown(teardown)

        if self._closed:
            _execute_teardown(teardown)
            return

        if isinstance(teardown, Subscription) and teardown.closed:
            return
        self._finalizers.append(teardown)

    def remove(self, teardown: Any) -> None:
        """Forget a teardown without running it."""
        try:
            self._finalizers.remove(teardown)
        except ValueError:
            pass

    def unsubscribe(self) -> None:
        """
        Run every registered teardown once.

        Safe to call repeatedly and from inside a teardown or an event
        handler. If any teardown raises, the remaining ones still run and an
        ``UnsubscriptionError`` carrying all failures is raised afterwards.
        """
        if self._closed:
            return
        self._closed = True

        finalizers, self._finalizers = self._finalizers, []
        errors: List[BaseException] = []
        for teardown in finalizers:
            try:
                _execute_teardown(teardown)
            except UnsubscriptionError as e:
                errors.extend(e.errors)
            except Exception as e:
                logging.debug(f"Teardown {teardown!r} failed: {e!r}")
                errors.append(e)

        if errors:
            raise UnsubscriptionError(errors)

    # Context manager support: cancels on exit
    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.unsubscribe()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"{type(self).__name__}({state}, teardowns={len(self._finalizers)})"


def _check_teardown(teardown: Any) -> None:
    if callable(teardown) or isinstance(teardown, Unsubscribable):
        return
    raise TypeError(
        f"Teardown must be callable or have an unsubscribe() method, got {type(teardown).__name__}"
    )


def _execute_teardown(teardown: Any) -> None:
    if isinstance(teardown, Subscription) or not callable(teardown):
        teardown.unsubscribe()
    else:
        teardown()

