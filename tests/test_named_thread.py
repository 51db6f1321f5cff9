import threading

from ftpp.named_thread import Thread


def test_runs_function_and_reports(capsys):
    calls = []
    thread = Thread("worker", lambda: calls.append(1))
    thread.start()
    thread.stop()
    assert calls == [1]
    assert capsys.readouterr().out.splitlines() == [
        "worker Starting execution",
        "worker Finished execution",
        "worker Stopped",
    ]


def test_running_flag():
    gate = threading.Event()
    thread = Thread("t", lambda: gate.wait(5))
    assert thread.is_running is False
    thread.start()
    assert thread.is_running is True
    gate.set()
    thread.stop()
    assert thread.is_running is False


def test_start_twice_runs_once():
    gate = threading.Event()
    calls = []

    def job():
        calls.append(1)
        gate.wait(5)

    thread = Thread("t", job)
    thread.start()
    thread.start()
    assert thread.is_running is True
    gate.set()
    thread.stop()
    assert thread.is_running is False
    assert calls == [1]


def test_stop_without_start_prints_nothing(capsys):
    thread = Thread("idle", lambda: None)
    thread.stop()
    assert capsys.readouterr().out == ""
    assert thread.name == "idle"


def test_can_restart_after_stop():
    calls = []
    thread = Thread("again", lambda: calls.append(1))
    thread.start()
    thread.stop()
    thread.start()
    thread.stop()
    assert calls == [1, 1]