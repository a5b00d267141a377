# algokit

A small collection of algorithms and data structures, using only the standard library.

- **Caches** (`algokit.caches`): `LRUCache`, `LFUCache` and `ExpiringCache`.
- **Consistent hashing** (`algokit.hashring`): `ConsistentHashing`, a hash ring of
  virtual nodes, each a `CacheServer` that counts the keys routed to it.
- **Locks** (`algokit.locks`): `LightweightLock`, which only tries to take its lock
  and never waits, and `HeavyweightLock`, which blocks until it gets it.
- **Puzzles** (`algokit.puzzles`): `house_robber`, `max_profit`, `gcd`, `rotate` and
  `three_sum`.
- **Memory helpers** (`algokit.memory`): `align_up` and `page_size`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Caches

```python
from algokit.caches import LRUCache, LFUCache, ExpiringCache

lru = LRUCache(2)
lru.put(1, 100)
lru.put(2, 200)
lru.get(1)      # 100, and key 1 is now the most recently used
lru.put(3, 300) # evicts key 2, the least recently used
lru.get(2)      # None: a miss

lfu = LFUCache(2)
lfu.put(1, 10)
lfu.put(2, 20)
lfu.get(1)      # 10; key 1 has now been used twice
lfu.frequency(1)  # 2
lfu.put(3, 30)  # evicts key 2, the least frequently used

timed = ExpiringCache(5)  # entries live for five seconds after each put
timed.put(7, 70)
timed.get(7)    # 70 until the entry expires, None afterwards
```

- A miss returns `None` in all three caches.
- Keys may be any hashable value.
- `LRUCache` and `LFUCache` support `len()` and `in`.
- A capacity of 0 makes `put` a no-op, and a negative capacity raises `ValueError`.
- In `LFUCache`, ties between entries with the same use count go to the one used longest ago.
- `ExpiringCache` is safe to share between threads. It accepts an optional `clock`
  callable, which defaults to `time.monotonic`. An expired entry is dropped the next
  time it is read.

## Consistent hashing

```python
from algokit.hashring import ConsistentHashing

ring = ConsistentHashing(3)
ring.add_node("127.0.0.1:6379", 5)   # five virtual nodes for this server
ring.add_node("127.0.0.1:16379", 5)

ring.get_node("cache-key-1")         # name of the virtual node, e.g. "127.0.0.1:6379#2"
ring.cache_distribution()            # {"127.0.0.1:6379": ..., "127.0.0.1:16379": ...}
ring.remove_node("127.0.0.1:16379")
```

Each virtual node is named `<node>#<index>`. Keys are hashed with 64-bit BLAKE2b. A key
goes to the first virtual node at or after its hash on the ring, wrapping round to the
start.

- Every `get_node` call adds one to that virtual node's `cache_size`.
- `cache_distribution` returns the totals per real node.
- `get_node` on an empty ring raises `LookupError`.
- `remove_node` removes only virtual nodes `#0` up to `#replicas - 1`, where `replicas`
  is the number given to the constructor.

To route two thousand sample keys across two servers and print where they land:

```
algokit-hashring
```

## Locks

```python
from algokit.locks import LightweightLock, HeavyweightLock

light = LightweightLock()
light.lock()          # one non-blocking attempt
if light.is_locked():
    ...               # the attempt succeeded and this thread holds the lock
    light.unlock()

heavy = HeavyweightLock()
with heavy:           # waits until the lock is free
    ...
```

Ownership is tracked per thread. `unlock` from a thread that does not hold the lock
does nothing.

`worker(light_lock, heavy_lock, worker_id, rounds=10, hold=10.0)` runs the pattern the
two locks are made for. It first tries the lightweight lock and falls back to the
heavyweight one when that is busy. Whichever lock it takes, it holds for `hold` seconds.
It prints each message and also returns the list of messages.

To watch several worker threads compete for the locks:

```
algokit-locks [--threads 5] [--rounds 10] [--hold 10.0]
```

## Puzzles

```python
from algokit.puzzles import house_robber, max_profit, gcd, rotate, three_sum

house_robber([1, 3, 1, 4, 2, 1])   # 8: best total from non-adjacent houses
max_profit([1, 2, 9, 5, 3, 6])     # 8: best single buy-then-sell
gcd(7, 3)                          # 1
rotate([1, 2, 3, 4, 5, 6], 8)      # [5, 6, 1, 2, 3, 4]
three_sum([-1, 0, 1, 2, -1, -4])   # [(-1, -1, 2), (-1, 0, 1)]
```

- `rotate` returns a new list rotated right by `k` places, and leaves its input unchanged.
- `gcd` raises `ZeroDivisionError` when `b` is 0.

## Memory helpers

```python
from algokit.memory import align_up, page_size

align_up(10, 4)   # 12
page_size()       # the system's memory page size in bytes
```

`align_up` raises `ValueError` if the alignment is not a positive power of two, or if
the value is negative.

## What it does not do

The caches and the hash ring live in the memory of one process. There is no cache
server, no network access and no persistent storage. The hash ring only decides which
node a key belongs to and counts placements; it stores no values and does not move
keys when nodes are added or removed.