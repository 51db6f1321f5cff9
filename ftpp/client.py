"""A TCP client exchanging framed messages with a server."""

from __future__ import annotations

import socket
import sys
import threading
from typing import Callable, Optional

from ftpp.message import HEADER_SIZE, Message, decode_header, encode_frame

_CHUNK = 65536


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


class Client:
    """Connects to a server, sends messages and queues the ones it receives.

    Received messages are handed to the actions defined for their type when
    ``update`` is called, on the calling thread.
    """

    def __init__(self) -> None:
        self._sock: Optional[socket.socket] = None
        self._connected = False
        self._reader: Optional[threading.Thread] = None
        self._reading = False
        self._actions: dict[int, Callable[[Message], None]] = {}
        self._incoming: list[Message] = []
        self._incoming_lock = threading.Lock()
        self._send_lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self, address: str, port: int) -> None:
        """Connect to ``address``:``port`` over IPv4 and start receiving.

        Raises ConnectionError when the name cannot be resolved or the
        connection is refused.
        """
        if self._connected:
            print("[Client] Already connected.", file=sys.stderr)
            return
        try:
            host = socket.gethostbyname(address)
        except (OSError, UnicodeError) as error:
            raise ConnectionError("Client: gethostbyname failed.") from error
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.connect((host, port))
        except OSError as error:
            sock.close()
            raise ConnectionError("Client: connect() failed.") from error

        self._sock = sock
        self._connected = True
        print(f"[Client] Connected to {address}:{port}", flush=True)

        self._reading = True
        self._reader = threading.Thread(
            target=self._read_loop, args=(sock,), name="client-reader", daemon=True
        )
        self._reader.start()

    def disconnect(self) -> None:
        """Close the connection and stop receiving; does nothing when not connected."""
        if not self._connected or self._sock is None:
            return
        self._reading = False
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._sock.close()
        self._sock = None
        self._connected = False

        if self._reader is not None and self._reader is not threading.current_thread():
            self._reader.join()
        self._reader = None
        print("[Client] Disconnected.", flush=True)

    def define_action(
        self, message_type: int, action: Callable[[Message], None]
    ) -> None:
        """Set the action run for received messages of ``message_type``."""
        self._actions[message_type] = action

    def send(self, message: Message) -> None:
        """Send ``message``; raises ConnectionError if the connection is lost."""
        if not self._connected or self._sock is None:
            print("[Client] Cannot send: not connected.", file=sys.stderr)
            return
        frame = encode_frame(message)
        try:
            with self._send_lock:
                self._sock.sendall(frame)
        except OSError as error:
            raise ConnectionError("[Client] send() failed or connection lost.") from error

    def update(self) -> None:
        """Run the defined actions for every message received since the last call."""
        with self._incoming_lock:
            pending, self._incoming = self._incoming, []
        for message in pending:
            action = self._actions.get(message.type)
            if action is not None:
                action(message)

    def _read_loop(self, sock: socket.socket) -> None:
        while self._reading:
            header = _recv_exact(sock, HEADER_SIZE)
            if header is None:
                break
            message_type, body_size = decode_header(header)
            body = _recv_exact(sock, body_size) if body_size else b""
            if body is None:
                break
            with self._incoming_lock:
                self._incoming.append(Message(message_type, body))
        if self._reading:
            print("[Client] Server closed connection or error.", file=sys.stderr)
        self._reading = False

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()