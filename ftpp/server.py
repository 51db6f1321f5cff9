"""A TCP server exchanging framed messages with many clients."""

from __future__ import annotations

import itertools
import socket
import sys
import threading
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from ftpp.message import HEADER_SIZE, Message, decode_header, encode_frame

_CHUNK = 65536
_ACCEPT_POLL = 0.2


def _recv_exact(sock: socket.socket, size: int) -> Optional[bytes]:
    """Receive exactly ``size`` bytes, or None if the connection ends first."""
    data = bytearray()
    while len(data) < size:
        try:
            chunk = sock.recv(min(size - len(data), _CHUNK))
        except OSError:
            return None
        if not chunk:
            return None
        data += chunk
    return bytes(data)


def _close(sock: socket.socket) -> None:
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    sock.close()


@dataclass
class _ClientInfo:
    sock: socket.socket
    active: bool = True
    send_lock: threading.Lock = field(default_factory=threading.Lock)


class Server:
    """Accepts clients, numbers them from 1 and queues the messages they send.

    Received messages are handed to the actions defined for their type when
    ``update`` is called, on the calling thread.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._clients: dict[int, _ClientInfo] = {}
        self._clients_lock = threading.Lock()
        self._readers: dict[int, threading.Thread] = {}
        self._listener: Optional[socket.socket] = None
        self._acceptor: Optional[threading.Thread] = None
        self._accepting = False
        self._actions: dict[int, Callable[[int, Message], None]] = {}
        self._incoming: list[tuple[int, Message]] = []
        self._incoming_lock = threading.Lock()

    @property
    def port(self) -> Optional[int]:
        """The port being listened on, or None when not started."""
        if self._listener is None:
            return None
        return self._listener.getsockname()[1]

    def start(self, port: int) -> None:
        """Listen on ``port`` on all IPv4 interfaces and start accepting clients.

        Port 0 picks a free port. Raises OSError when the port cannot be bound.
        """
        if self._listener is not None:
            raise RuntimeError("Server already started")
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            listener.bind(("", port))
        except OSError as error:
            listener.close()
            raise OSError("Server: bind() failed.") from error
        try:
            listener.listen(socket.SOMAXCONN)
        except OSError as error:
            listener.close()
            raise OSError("Server: listen() failed.") from error
        listener.settimeout(_ACCEPT_POLL)

        self._listener = listener
        print(f"[Server] Started on port {self.port}", flush=True)

        self._accepting = True
        self._acceptor = threading.Thread(
            target=self._accept_loop, args=(listener,), name="server-accept", daemon=True
        )
        self._acceptor.start()

    def stop(self) -> None:
        """Stop accepting, disconnect every client and wait for all threads."""
        self._accepting = False
        if self._acceptor is not None:
            self._acceptor.join()
            self._acceptor = None
        if self._listener is not None:
            self._listener.close()
            self._listener = None

        with self._clients_lock:
            clients = list(self._clients.values())
            readers = list(self._readers.values())
        for info in clients:
            info.active = False
            _close(info.sock)
        current = threading.current_thread()
        for reader in readers:
            if reader is not current:
                reader.join()
        with self._clients_lock:
            self._readers.clear()
            self._clients.clear()

    def define_action(
        self, message_type: int, action: Callable[[int, Message], None]
    ) -> None:
        """Set the action run with ``(client_id, message)`` for ``message_type``."""
        self._actions[message_type] = action

    def send_to(self, message: Message, client_id: int) -> None:
        """Send ``message`` to one client; failures are reported, not raised."""
        with self._clients_lock:
            info = self._clients.get(client_id)
        if info is None or not info.active:
            print(
                f"[Server] Can't send to client {client_id}: not active.",
                file=sys.stderr,
            )
            return
        frame = encode_frame(message)
        try:
            with info.send_lock:
                info.sock.sendall(frame)
        except OSError as error:
            print(
                f"[Server] sendTo failed for client {client_id} : {error}",
                file=sys.stderr,
            )

    def send_to_array(self, message: Message, client_ids: Iterable[int]) -> None:
        for client_id in client_ids:
            self.send_to(message, client_id)

    def send_to_all(self, message: Message) -> None:
        """Send ``message`` to every connected client."""
        with self._clients_lock:
            active = [cid for cid, info in self._clients.items() if info.active]
        for client_id in active:
            self.send_to(message, client_id)

    def update(self) -> None:
        """Run the defined actions for every message received since the last call."""
        with self._incoming_lock:
            pending, self._incoming = self._incoming, []
        for client_id, message in pending:
            action = self._actions.get(message.type)
            if action is not None:
                action(client_id, message)

    def _accept_loop(self, listener: socket.socket) -> None:
        print("[Server] Listening for new connections...", flush=True)
        while self._accepting:
            try:
                conn, _ = listener.accept()
            except socket.timeout:
                continue
            except OSError:
                if not self._accepting or listener.fileno() == -1:
                    break
                print("[Server] accept() failed.", file=sys.stderr)
                continue
            conn.settimeout(None)

            with self._clients_lock:
                client_id = next(self._ids)
                self._clients[client_id] = _ClientInfo(conn)
                reader = threading.Thread(
                    target=self._client_read_loop,
                    args=(client_id, conn),
                    name=f"server-client-{client_id}",
                    daemon=True,
                )
                self._readers[client_id] = reader
            print(f"[Server] Accepted client with ID={client_id}", flush=True)
            reader.start()

    def _client_read_loop(self, client_id: int, sock: socket.socket) -> None:
        while True:
            header = _recv_exact(sock, HEADER_SIZE)
            if header is None:
                break
            message_type, body_size = decode_header(header)
            body = _recv_exact(sock, body_size) if body_size else b""
            if body is None:
                break
            with self._incoming_lock:
                self._incoming.append((client_id, Message(message_type, body)))

        with self._clients_lock:
            info = self._clients.get(client_id)
        if info is not None:
            info.active = False
        sock.close()
        print(f"[Server] Client {client_id} disconnected.", flush=True)

    def __enter__(self) -> Server:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()