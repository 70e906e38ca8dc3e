from rmwcore.event import Event, EventType, zero_initialized_event


def test_zero_initialized_event():
    event = zero_initialized_event()
    assert event.implementation_identifier is None
    assert event.data is None
    assert event.event_type is EventType.INVALID


def test_fini_resets_event():
    event = Event("impl", {"payload": 1}, EventType.MESSAGE_LOST)
    event.fini()
    assert event == zero_initialized_event()


def test_invalid_is_last_kind():
    event = zero_initialized_event()
    assert event.event_type is max(EventType)
    assert EventType(len(EventType) - 1) is EventType.INVALID


def test_subscription_kinds_precede_publisher_kinds():
    assert EventType(0) is EventType.LIVELINESS_CHANGED
    assert EventType(5) is EventType.SUBSCRIPTION_MATCHED
    assert EventType(6) is EventType.LIVELINESS_LOST
    assert EventType.SUBSCRIPTION_MATCHED < EventType.LIVELINESS_LOST