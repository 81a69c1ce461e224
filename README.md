# patternkit

A small toolkit of reusable building blocks for Python programs, built on the
standard library only:

- **Search routines** (`patternkit.search`): `search`, `search_insert`,
  `search_range`, `search_range_scan`, `binary_search`,
  `next_greatest_letter`, `count_negatives` (for a grid whose rows are sorted
  in descending order) and `is_valid` (bracket matching).
- **Lazy sequences** (`patternkit.sequences`): `fibonacci`, `integers`,
  `even`, `multiply`, `filter_values`, `backward`, `indexed` and `equal`.
- **Fluent streams** (`patternkit.fluent`): a chainable `Stream` with `map`,
  `filter`, `each`, `reverse` and `collect`.
- **Data structures** (`patternkit.structures`): a push-front `LinkedList`,
  an iterable `Collection` of `CollectionItem`s, and a `TreeNode` with
  `pre_order` and `in_order` traversals.
- **Channels and pipelines** (`patternkit.channel`, `patternkit.fanning`,
  `patternkit.stopping`): a thread-safe `Channel`, producer and stage helpers,
  merging, round-robin splitting, tee, a two-stage parsing pipeline, and
  stop-aware forwarding and periodic workers.
- **Concurrency primitives** (`patternkit.futures`, `patternkit.primitives`,
  `patternkit.pool`, `patternkit.singleflight`, `patternkit.ratelimit`,
  `patternkit.scheduler`): futures and promises, a semaphore, a blocking
  queue, a call-once guard, an error group, a worker pool, single-flight call
  collapsing, a rate limiter and a task scheduler.
- **Book catalogue** (`patternkit.books`): a `Book` record stored in SQLite
  and read back lazily with `do_query`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Search

```python
from patternkit.search import search, search_insert, search_range, is_valid

search([1, 2, 3, 4, 5, 6, 7], 5)         # 4
search([1, 3, 5], 4)                     # -1
search_insert([1, 3, 5, 7, 9], 6)        # 3
search_range([5, 7, 7, 8, 8, 10], 8)     # (3, 4)
search_range([5, 7, 7, 8, 8, 10], 6)     # (-1, -1)
is_valid("{([])}")                       # True
```

`next_greatest_letter` wraps around to the first letter when none is greater
than the target, and raises `IndexError` on an empty sequence.

## Lazy sequences

```python
from patternkit.sequences import integers, even, multiply, filter_values, fibonacci, equal

list(even(integers(10)))                                         # [0, 2, 4, 6, 8]
list(filter_values(multiply(integers(10), 3), lambda v: v % 2))  # [3, 9, 15, 21, 27]
list(fibonacci(5))                                               # [0, 1, 1, 2, 3, 5]
equal([1, 2, 3], iter([1, 2, 3]))                                # True
equal([1, 2], [1, 2, 3])                                         # False
```

## Fluent streams

`map` and `filter` rebind the stream in place and return it; `reverse`
returns a new stream over the current values.

```python
from patternkit.fluent import Stream

Stream([1, 2, 3, 4, 5, 6, 7, 8]).map(lambda v: v * v).filter(lambda v: v % 2 == 0).reverse().collect()
# [64, 36, 16, 4]
```

## Channels and pipelines

A `Channel(capacity=0)` is unbuffered: `send` waits until a receiver takes the
value. Iterating a channel ends once it is closed and drained. Sending to a
closed channel, closing it twice, or calling `receive` on a closed empty
channel raises `ChannelClosedError`; `receive(timeout=...)` raises
`TimeoutError` when nothing arrives in time.

```python
from patternkit.channel import generate, generate_values, transform, filter_channel
from patternkit.fanning import merge_channels, split_channel, tee_channel

squares = transform(generate(1, 8), lambda v: v * v)
list(filter_channel(squares, lambda v: v % 2 == 0))     # [4, 16, 36]

sorted(merge_channels(generate(0, 3), generate(10, 13)))  # [0, 1, 2, 10, 11, 12]
```

`split_channel` deals values round-robin over `n` channels and `tee_channel`
copies every value into each of `n` channels; every output must be read for
the producer to make progress. `parse_data`/`send_parsed_data` and
`parse_data_split`/`send_parsed` tag strings as they pass through.

`patternkit.stopping` offers `stop_or_done(channel, event)`, which forwards
values until the input closes or the `threading.Event` is set,
`StopOrDoneWorker` (the same, with `shutdown()`), `process(stop, period,
routine)`, and `PeriodicWorker(period, routine)` with `launch()` and
`shutdown()`.

## Futures and primitives

```python
from patternkit.futures import run_async, Promise
from patternkit.primitives import Semaphore, CallOnce, ErrorGroup

run_async(lambda: "Hello, world").get()   # "Hello, world"

promise = Promise()
future = promise.get_future()
promise.set(42)
future.get(timeout=1)                     # 42

once = CallOnce()
once.once(lambda: print("ran"))           # True
once.once(lambda: print("ran"))           # False

group = ErrorGroup()
group.go(lambda: 1 / 0)
group.wait()                              # raises ZeroDivisionError
```

`Future.get` re-raises an error raised by the operation. `CallbackPromise`
runs a routine and passes its result or error to `then(on_success,
on_error)`. `Semaphore` works as a context manager, and `go` runs a routine
in a thread while holding a slot. `BlockingQueue.front` waits for a value.

## Worker pool, single flight and rate limiting

```python
from patternkit.pool import WorkerPool
from patternkit.singleflight import SingleFlight
from patternkit.ratelimit import RateLimiter

with WorkerPool(4, 100) as pool:
    for i in range(10):
        pool.do(lambda i=i: print("task", i))
# leaving the block runs every queued task, then stops the workers

flight = SingleFlight()
flight.do("user", lambda: "expensive result")

with RateLimiter(10, 1.0) as limiter:
    limiter.allow_call()                  # True
    limiter.allow_call()                  # False until the token is refilled
```

After `graceful_shutdown` or `force_shutdown`, `WorkerPool.do` raises
`PoolClosedError`; `force_shutdown` drops tasks still waiting in the queue.

## Scheduler

`Scheduler.run` executes due tasks on the calling thread until `stop` is
called from another thread. A task returns `True` to be removed;
`add_one_shot` tasks run once.

## Command-line programs

```
patternkit-books [DATABASE]
```

creates the books table in a SQLite file (default `books.db`), inserts four
sample books (again on every run) and prints those whose theme is "Story".

```
patternkit-scheduler [--period SECONDS] [--duration SECONDS]
```

prints `Println` every period (default 1 second) and stops after the
duration (default 5 seconds).

## What it does not do

All concurrency here is thread-based; there are no asyncio variants. The
package runs no network services: it has no authentication server or client
and no HTTP endpoints.