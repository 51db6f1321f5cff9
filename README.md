# ftpp

A small general-purpose toolbox for Python 3.10 and later, with no
third-party dependencies.

| Module | Contents |
| --- | --- |
| `ftpp.data_buffer` | `DataBuffer`: a first-in, first-out byte buffer of `struct`-packed values |
| `ftpp.pool` | `Pool` and `PooledObject`: a fixed number of slots handed out through owning handles |
| `ftpp.memento` | `Memento` and `Snapshot`: save and restore object state |
| `ftpp.observer` | `Observer`: event callbacks |
| `ftpp.singleton` | `Singleton`: one explicitly created instance per subclass |
| `ftpp.state_machine` | `StateMachine`: states, per-state actions and transitions |
| `ftpp.ivector` | `IVector2`, `IVector3`: component-wise vectors |
| `ftpp.random_engine` | `MT19937`, `seed_sequence`, `shuffle` |
| `ftpp.perlin_noise` | `PerlinNoise2D`: deterministic 2D gradient noise |
| `ftpp.random_coordinates` | `Random2DCoordinateGenerator`: a repeatable value for each `(x, y)` |
| `ftpp.thread_safe_iostream` | `ThreadSafeIOStream`, `thread_safe_cout()`, `thread_safe_cin()` |
| `ftpp.thread_safe_queue` | `ThreadSafeQueue`: a locked double-ended queue |
| `ftpp.named_thread` | `Thread`: a named thread that announces its start and finish |
| `ftpp.worker_pool` | `WorkerPool`: threads that run queued jobs |
| `ftpp.persistent_worker` | `PersistentWorker`: a thread that runs named tasks over and over |
| `ftpp.message` | `Message`, `encode_frame`, `decode_header` |
| `ftpp.client`, `ftpp.server` | `Client` and `Server`, which exchange framed messages over TCP |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Data structures

`DataBuffer.write(fmt, *args)` packs values with a `struct` format. If the
format has no byte-order character, little-endian with standard sizes is used.
`read(fmt)` takes values from the front. A format with one value returns that
value and a format with several returns a tuple. Reading more bytes than the
buffer holds raises `ValueError`.

```python
from ftpp.data_buffer import DataBuffer

buf = DataBuffer()
buf.write("i", 42).write("d", 3.5)
assert buf.read("i") == 42
assert buf.read("d") == 3.5
assert len(buf) == 0
```

`Pool(factory)` starts with no slots. `resize(count)` adds free slots.
`acquire(*args, **kwargs)` calls the factory and returns a `PooledObject`. It
raises `RuntimeError` when no slot is free. If the factory raises, the slot is
returned to the pool. The handle exposes the object as `.value` and forwards
attribute access to it. It gives its slot back on `release()` or when a `with`
block ends.

```python
from ftpp.pool import Pool

pool = Pool(dict)
pool.resize(2)
with pool.acquire(a=1) as item:
    assert item.value == {"a": 1}
    assert len(pool) == 1
assert len(pool) == 2
```

## Design patterns

A `Memento` subclass implements `_save_to_snapshot` and `_load_from_snapshot`.
`save()` returns a `Snapshot`. `load(snapshot)` reads from a copy, so the same
snapshot can be loaded more than once.

```python
from ftpp.memento import Memento

class Counter(Memento):
    def __init__(self):
        self.value = 0

    def _save_to_snapshot(self, snapshot):
        snapshot.write("q", self.value)

    def _load_from_snapshot(self, snapshot):
        self.value = snapshot.read("q")

counter = Counter()
counter.value = 5
saved = counter.save()
counter.value = 9
counter.load(saved)
assert counter.value == 5
```

`Observer.subscribe(event, callback)` registers a callback.
`notify(event)` calls the callbacks for that event in the order they were
subscribed. An event with no callbacks does nothing.

`Singleton.instantiate(*args, **kwargs)` creates the subclass's instance and
`instance()` returns it. Either raises `RuntimeError` when used in the wrong
order.

The first state added to a `StateMachine` becomes the current state.
`transition_to` only follows transitions added with `add_transition` and runs
their callback. An unknown state or an undefined transition raises
`ValueError`. `update()` runs the current state's action, if it has one.

```python
from ftpp.state_machine import StateMachine

sm = StateMachine()
sm.add_state("idle")
sm.add_state("running")
sm.add_transition("idle", "running", lambda: print("starting"))
sm.add_action("running", lambda: print("tick"))
sm.transition_to("running")
sm.update()
assert sm.current_state == "running"
```

## Mathematics

`IVector2` and `IVector3` are dataclasses. They support component-wise `+`,
`-`, `*` and `/`. Integer division truncates toward zero. They also provide
`length()`, `normalize()` and `dot()`. `normalize()` returns a zero vector
when the length is zero. `IVector2.cross()` returns `(-y, x)` and
`IVector3.cross(other)` returns the cross product.

`MT19937` is the 32-bit Mersenne Twister. `MT19937.from_seed_sequence(values)`
seeds the engine through `seed_sequence`. `shuffle(items, engine)` permutes a
list in place.

`PerlinNoise2D().sample(x, y)` is deterministic. It returns zero on integer
lattice points, and the lattice repeats every 256 units.

`Random2DCoordinateGenerator(seed=42)` maps `(x, y)` to a repeatable 32-bit
value for its seed.

## Threading

`ThreadSafeIOStream` buffers text passed to `write(...)`. `flush()`, or
`writeline(...)`, writes the prefix and the buffered text under one shared
lock. `read()` returns one whitespace-delimited token. `prompt(question)`
returns the next input line. `thread_safe_cout()` and `thread_safe_cin()`
return a stream per thread.

`ThreadSafeQueue` offers `push_back`, `push_front`, `pop_back` and
`pop_front`. Popping from an empty queue raises `IndexError`.

`Thread(name, func)` runs `func` when `start()` is called. It prints
" Starting execution" and " Finished execution", prefixed with its name.
`stop()` waits for the function to end.

`WorkerPool(num_threads)` runs jobs passed to `add_job` in FIFO order.
`shutdown()`, also called when a `with` block ends, finishes every queued job
first. A job that raises has its traceback printed and does not stop the
pool.

```python
from ftpp.worker_pool import WorkerPool

with WorkerPool(4) as pool:
    for n in range(10):
        pool.add_job(lambda n=n: print(n))
```

`PersistentWorker` runs every task registered with `add_task(name, task)` in a
loop until `stop()` is called. The thread sleeps while no task is registered.

## Networking

A `Message` has an integer type, which must fit in a signed 32-bit integer,
and a body. `write(fmt, *args)` appends to the body. `read(fmt)` advances a
cursor without removing bytes. On the wire, `encode_frame` sends a 16-byte
header: the type, padding and a 64-bit body size. The body follows.

`Server.start(port)` listens on all IPv4 interfaces, and port 0 picks a free
port, which the `port` property shows. Clients are numbered from 1.
`Client.connect(address, port)` raises `ConnectionError` when it fails.
Received messages are queued. `update()` runs the action defined for each
message's type on the calling thread. A server action receives
`(client_id, message)` and a client action receives `(message)`.

```python
import time

from ftpp.client import Client
from ftpp.message import Message
from ftpp.server import Server

with Server() as server:
    server.define_action(1, lambda client_id, msg: print(client_id, msg.read("i")))
    server.start(0)

    with Client() as client:
        client.connect("localhost", server.port)
        client.send(Message(1).write("i", 7))
        time.sleep(0.2)

    server.update()
```

`Server.send_to`, `send_to_array` and `send_to_all` report failures on
standard error and do not raise. `Client.send` raises `ConnectionError` when
the connection is lost.

## What it does not do

The package is a library only and installs no command. The networking layer
is plain IPv4 TCP. It has no encryption, authentication or automatic
reconnection. Messages are delivered only when `update()` is called.