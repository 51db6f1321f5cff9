from ftpp.observer import Observer


def test_callbacks_run_in_subscription_order():
    observer = Observer()
    calls = []
    observer.subscribe("tick", lambda: calls.append("a"))
    observer.subscribe("tick", lambda: calls.append("b"))
    observer.notify("tick")
    assert calls == ["a", "b"]


def test_only_matching_event_fires():
    observer = Observer()
    calls = []
    observer.subscribe(1, lambda: calls.append(1))
    observer.subscribe(2, lambda: calls.append(2))
    observer.notify(2)
    assert calls == [2]


def test_unknown_event_is_ignored():
    observer = Observer()
    calls = []
    observer.subscribe("known", lambda: calls.append("known"))
    observer.notify("unknown")
    assert calls == []


def test_repeated_notify_calls_again():
    observer = Observer()
    calls = []
    observer.subscribe("e", lambda: calls.append("e"))
    observer.notify("e")
    observer.notify("e")
    assert len(calls) == 2