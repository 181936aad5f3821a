"""Unit tests for Observable subscription behavior."""

import pytest

from rxcore import Observable, Subscriber, SubscriberState, Subscription, config
from rxcore.types import Observer


def counting_producer(log):
    def producer(subscriber):
        log.append("subscribed")
        subscriber.next(1)
        subscriber.next(2)
        subscriber.complete()
        return lambda: log.append("teardown")

    return producer


@pytest.mark.unit
@pytest.mark.observable
def test_observable_is_lazy():
    """Constructing an Observable does not run its producer"""
    # Arrange
    log = []

    # Act
    Observable(counting_producer(log))

    # Assert
    assert log == []


@pytest.mark.unit
@pytest.mark.observable
def test_subscribe_with_callbacks_receives_events():
    """subscribe() accepts individual handler functions"""
    # Arrange
    received = []
    completed = []
    numbers = Observable(counting_producer([]))

    # Act
    numbers.subscribe(received.append, None, lambda: completed.append(True))

    # Assert
    assert received == [1, 2]
    assert completed == [True]


@pytest.mark.unit
@pytest.mark.observable
def test_subscribe_with_observer_object(recorder):
    """subscribe() accepts an object with on_next/on_error/on_complete"""
    assert isinstance(recorder, Observer)

    Observable(counting_producer([])).subscribe(recorder)

    assert recorder.events == [("next", 1), ("next", 2), ("complete",)]


@pytest.mark.unit
@pytest.mark.observable
def test_subscribe_with_partial_observer():
    """An observer providing only on_next is accepted"""

    # Arrange
    class ValuesOnly:
        def __init__(self):
            self.values = []

        def on_next(self, value):
            self.values.append(value)

    observer = ValuesOnly()

    # Act
    Observable(counting_producer([])).subscribe(observer)

    # Assert
    assert observer.values == [1, 2]


@pytest.mark.unit
@pytest.mark.observable
def test_subscribe_with_existing_subscriber_uses_it():
    """A Subscriber passed to subscribe() is driven directly and returned"""
    # Arrange
    received = []
    subscriber = Subscriber(received.append)

    # Act
    subscription = Observable(counting_producer([])).subscribe(subscriber)

    # Assert
    assert subscription is subscriber
    assert received == [1, 2]


@pytest.mark.unit
@pytest.mark.observable
@pytest.mark.edge_case
def test_subscribe_rejects_unsupported_consumer():
    """subscribe() raises TypeError for consumers it cannot normalize"""
    with pytest.raises(TypeError):
        Observable(counting_producer([])).subscribe(42)


@pytest.mark.unit
@pytest.mark.observable
def test_resubscribing_reruns_producer():
    """Each subscription runs the producer again from scratch"""
    # Arrange
    log = []
    numbers = Observable(counting_producer(log))

    # Act
    numbers.subscribe()
    numbers.subscribe()

    # Assert
    assert log.count("subscribed") == 2


@pytest.mark.unit
@pytest.mark.observable
def test_subscribe_returns_subscription():
    """subscribe() returns a cancellation handle"""
    subscription = Observable(counting_producer([])).subscribe()

    assert isinstance(subscription, Subscription)


@pytest.mark.unit
@pytest.mark.observable
def test_teardown_returned_after_synchronous_completion_runs_once():
    """A producer completing before returning its teardown still gets it run once"""
    # Arrange
    log = []
    numbers = Observable(counting_producer(log))

    # Act
    subscription = numbers.subscribe()
    subscription.unsubscribe()
    subscription.unsubscribe()

    # Assert
    assert log == ["subscribed", "teardown"]


@pytest.mark.unit
@pytest.mark.observable
def test_unsubscribe_runs_teardown_of_pending_stream():
    """unsubscribe() on a still-running stream runs teardown exactly once"""
    # Arrange
    log = []
    pending = {}

    def producer(subscriber):
        pending["subscriber"] = subscriber
        return lambda: log.append("teardown")

    received = []
    subscription = Observable(producer).subscribe(received.append)

    # Act
    subscription.unsubscribe()
    subscription.unsubscribe()
    pending["subscriber"].next("after cancel")
    pending["subscriber"].complete()

    # Assert
    assert log == ["teardown"]
    assert received == []
    assert subscription.state is SubscriberState.CANCELLED


@pytest.mark.unit
@pytest.mark.observable
def test_producer_may_return_subscription_as_teardown():
    """A Subscription returned by the producer is unsubscribed on teardown"""
    # Arrange
    inner = Subscription()

    # Act
    subscription = Observable(lambda subscriber: inner).subscribe()
    subscription.unsubscribe()

    # Assert
    assert inner.closed


@pytest.mark.unit
@pytest.mark.observable
def test_producer_exception_is_routed_to_error(recorder):
    """A producer raising synchronously errors the subscriber instead of escaping"""
    # Arrange
    boom = ValueError("producer failed")

    def producer(subscriber):
        subscriber.next(1)
        raise boom

    # Act
    Observable(producer).subscribe(recorder)

    # Assert
    assert recorder.events == [("next", 1), ("error", boom)]


@pytest.mark.unit
@pytest.mark.observable
@pytest.mark.edge_case
def test_producer_exception_after_completion_is_raised(recorder):
    """A producer raising after completing surfaces from subscribe() without a second terminal event"""
    # Arrange
    late = RuntimeError("too late")

    def producer(subscriber):
        subscriber.complete()
        raise late

    # Act
    with pytest.raises(RuntimeError) as excinfo:
        Observable(producer).subscribe(recorder)

    # Assert
    assert excinfo.value is late
    assert recorder.events == [("complete",)]


@pytest.mark.unit
@pytest.mark.observable
@pytest.mark.edge_case
def test_producer_exception_after_completion_goes_to_unhandled_hook(recorder):
    """With config.on_unhandled_error set, a late producer failure is handed to it"""
    # Arrange
    unhandled = []
    config.on_unhandled_error = unhandled.append
    late = RuntimeError("too late")

    def producer(subscriber):
        subscriber.complete()
        raise late

    # Act
    subscription = Observable(producer).subscribe(recorder)

    # Assert
    assert unhandled == [late]
    assert recorder.events == [("complete",)]
    assert subscription.state is SubscriberState.COMPLETED


@pytest.mark.unit
@pytest.mark.observable
@pytest.mark.edge_case
def test_producer_exception_without_error_handler_is_raised():
    """A producer failure sent to a consumer with no on_error surfaces from subscribe()"""
    # Arrange
    received = []
    boom = ValueError("producer failed")

    def producer(subscriber):
        subscriber.next(1)
        raise boom

    # Act
    with pytest.raises(ValueError) as excinfo:
        Observable(producer).subscribe(received.append)

    # Assert
    assert excinfo.value is boom
    assert received == [1]


@pytest.mark.unit
@pytest.mark.observable
@pytest.mark.edge_case
def test_consumer_complete_failure_is_raised_from_subscribe():
    """A raising on_complete callback is not swallowed by subscribe()"""
    received = []

    def on_complete():
        raise KeyError("consumer failed")

    with pytest.raises(KeyError):
        Observable(counting_producer([])).subscribe(received.append, None, on_complete)

    assert received == [1, 2]


@pytest.mark.unit
@pytest.mark.observable
@pytest.mark.edge_case
def test_consumer_error_handler_failure_is_raised_from_subscribe():
    """A raising on_error callback is not swallowed by subscribe()"""

    def producer(subscriber):
        subscriber.error(ValueError("original"))

    def on_error(err):
        raise LookupError("handler failed")

    with pytest.raises(LookupError):
        Observable(producer).subscribe(None, on_error)


@pytest.mark.unit
@pytest.mark.observable
def test_observable_without_producer_never_emits(recorder):
    """An Observable built without a producer emits nothing"""
    subscription = Observable().subscribe(recorder)

    assert recorder.events == []
    assert not subscription.closed


@pytest.mark.unit
@pytest.mark.observable
def test_pipe_applies_operators_left_to_right():
    """pipe(f, g) applies f first, then g"""
    # Arrange
    source = Observable(counting_producer([]))
    calls = []

    def first(observable):
        calls.append("first")
        return observable

    def second(observable):
        calls.append("second")
        return observable

    # Act
    result = source.pipe(first, second)

    # Assert
    assert calls == ["first", "second"]
    assert result is source


@pytest.mark.unit
@pytest.mark.observable
def test_pipe_without_operators_returns_same_observable():
    """pipe() with no operators is the identity"""
    source = Observable(counting_producer([]))

    assert source.pipe() is source
