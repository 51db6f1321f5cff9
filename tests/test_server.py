import socket
import time

import pytest

from ftpp.message import HEADER_SIZE, Message, encode_frame
from ftpp.server import Server


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _pump(server, received, count, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        server.update()
        if len(received) >= count:
            return True
        time.sleep(0.01)
    return False


@pytest.fixture
def server():
    srv = Server()
    srv.start(0)
    yield srv
    srv.stop()


def _connect(server):
    sock = socket.create_connection(("127.0.0.1", server.port), timeout=5)
    return sock


def _identify(server, sock):
    """Send a hello and return the id the server gave this connection."""
    seen = []
    server.define_action(100, lambda cid, msg: seen.append(cid))
    sock.sendall(encode_frame(Message(100)))
    assert _pump(server, seen, 1)
    return seen[0]


def test_receives_and_dispatches(server):
    received = []
    server.define_action(5, lambda cid, msg: received.append((cid, msg.type, msg.read("q"))))
    with _connect(server) as raw:
        raw.sendall(encode_frame(Message(5).write("q", 99)))
        assert _pump(server, received, 1)
    assert received == [(1, 5, 99)]


def test_clients_numbered_in_order(server):
    with _connect(server) as first:
        first_id = _identify(server, first)
        with _connect(server) as second:
            second_id = _identify(server, second)
    assert second_id == first_id + 1


def test_send_to_client(server):
    with _connect(server) as raw:
        cid = _identify(server, raw)
        message = Message(2).write("i", 5)
        server.send_to(message, cid)
        expected = encode_frame(message)
        assert _recv_exact(raw, len(expected)) == expected


def test_send_to_unknown_client_reports(server, capsys):
    server.send_to(Message(1), 42)
    assert "Can't send to client 42: not active." in capsys.readouterr().err


def test_send_to_all(server):
    with _connect(server) as a, _connect(server) as b:
        _identify(server, a)
        _identify(server, b)
        message = Message(8).write("h", 3)
        server.send_to_all(message)
        expected = encode_frame(message)
        assert _recv_exact(a, len(expected)) == expected
        assert _recv_exact(b, len(expected)) == expected


def test_send_to_array_only_listed(server):
    with _connect(server) as a, _connect(server) as b:
        a_id = _identify(server, a)
        _identify(server, b)
        message = Message(4)
        server.send_to_array(message, [a_id])
        assert _recv_exact(a, HEADER_SIZE) == encode_frame(message)
        b.settimeout(0.2)
        with pytest.raises(socket.timeout):
            b.recv(1)


def test_disconnected_client_becomes_inactive(server, capsys):
    raw = _connect(server)
    cid = _identify(server, raw)
    raw.close()
    out = ""
    deadline = time.monotonic() + 5
    while time.monotonic() < deadline and f"Client {cid} disconnected." not in out:
        out += capsys.readouterr().out
        time.sleep(0.01)
    server.send_to(Message(1), cid)
    assert f"Can't send to client {cid}: not active." in capsys.readouterr().err


def test_stop_closes_clients():
    srv = Server()
    srv.start(0)
    raw = _connect(srv)
    _identify(srv, raw)
    srv.stop()
    assert raw.recv(HEADER_SIZE) == b""
    assert srv.port is None
    raw.close()


def test_port_in_use_raises(server):
    other = Server()
    try:
        with pytest.raises(OSError):
            other.start(server.port)
    finally:
        other.stop()


def test_start_twice_raises(server):
    with pytest.raises(RuntimeError):
        server.start(0)


def test_context_manager_stops():
    with Server() as srv:
        srv.start(0)
        assert srv.port > 0
    assert srv.port is None