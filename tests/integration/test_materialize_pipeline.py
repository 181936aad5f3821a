"""Integration tests for materialize inside full pipelines."""

import pytest

from rxcore import (
    COMPLETE_NOTIFICATION,
    NotificationKind,
    Observable,
    Subscriber,
    next_notification,
    of,
)
from rxcore.operators import dematerialize, map, materialize


@pytest.mark.integration
@pytest.mark.operators
def test_faulty_mapping_is_materialized_as_error_notification(recorder):
    """Uppercasing a non-string mid-stream yields two values, one error notification, then completion"""
    # Arrange
    letters = of("a", "b", 13, "d")
    upper_case = letters.pipe(map(lambda x: x.upper()))

    # Act
    upper_case.pipe(materialize()).subscribe(recorder)

    # Assert
    notifications = recorder.values
    assert notifications[:2] == [next_notification("A"), next_notification("B")]
    assert notifications[2].kind is NotificationKind.ERROR
    assert isinstance(notifications[2].error, AttributeError)
    assert len(notifications) == 3
    assert recorder.terminal_events == [("complete",)]


@pytest.mark.integration
@pytest.mark.operators
def test_numeric_source_failing_in_mapping_step(recorder):
    """Values 1 and 2 pass, then the failing step becomes an error notification"""
    # Arrange
    def shout(value):
        if not isinstance(value, str):
            raise TypeError(f"cannot uppercase {type(value).__name__}")
        return value.upper()

    def producer(subscriber):
        subscriber.next(1)
        subscriber.next(2)
        try:
            shout(3)
        except TypeError as e:
            subscriber.error(e)

    # Act
    Observable(producer).pipe(materialize()).subscribe(recorder)

    # Assert
    kinds = [n.kind for n in recorder.values]
    assert kinds == [NotificationKind.NEXT, NotificationKind.NEXT, NotificationKind.ERROR]
    assert [n.value for n in recorder.values[:2]] == [1, 2]
    assert isinstance(recorder.values[2].error, TypeError)
    assert recorder.terminal_events == [("complete",)]


@pytest.mark.integration
@pytest.mark.operators
def test_materialize_then_dematerialize_restores_stream(recorder):
    """dematerialize() undoes materialize() for a completing stream"""
    of(1, 2, 3).pipe(materialize(), dematerialize()).subscribe(recorder)

    assert recorder.events == [("next", 1), ("next", 2), ("next", 3), ("complete",)]


@pytest.mark.integration
@pytest.mark.operators
def test_materialize_then_dematerialize_restores_error(recorder):
    """dematerialize() turns a materialized error back into an error signal"""
    of(1, "x").pipe(
        map(lambda x: x + 1), materialize(), dematerialize()
    ).subscribe(recorder)

    assert recorder.events[0] == ("next", 2)
    assert recorder.events[1][0] == "error"
    assert isinstance(recorder.events[1][1], TypeError)
    assert len(recorder.events) == 2


@pytest.mark.integration
@pytest.mark.operators
def test_chained_operators_tear_down_every_stage_once():
    """Cancelling the end of a chain tears down the source exactly once"""
    # Arrange
    log = []
    pending = {}

    def producer(subscriber):
        pending["upstream"] = subscriber
        return lambda: log.append("source teardown")

    pipeline = Observable(producer).pipe(map(lambda x: x), materialize(), map(repr))

    # Act
    subscription = pipeline.subscribe()
    pending["upstream"].next(1)
    subscription.unsubscribe()
    subscription.unsubscribe()
    pending["upstream"].next(2)

    # Assert
    assert log == ["source teardown"]


@pytest.mark.integration
@pytest.mark.operators
def test_values_arrive_in_emission_order_through_chain():
    """Ordering survives a chain of operators"""
    received = []

    of(*range(100)).pipe(map(lambda x: x), materialize()).subscribe(
        Subscriber(received.append)
    )

    assert [n.value for n in received[:-1]] == list(range(100))
    assert received[-1] is COMPLETE_NOTIFICATION
