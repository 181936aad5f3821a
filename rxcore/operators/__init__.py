"""
rxcore Operators
================

Operators are functions ``Observable -> Observable`` built on
``OperatorSubscriber``. Use them with ``Observable.pipe``:

    of(1, 2, 3).pipe(map(lambda x: x * 2), materialize())
"""

from .dematerialize import dematerialize
from .map import map
from .materialize import materialize
from .operator_subscriber import OperatorSubscriber, create_operator_subscriber

__all__ = [
    "OperatorSubscriber",
    "create_operator_subscriber",
    "dematerialize",
    "map",
    "materialize",
]
