"""A try-once lightweight lock, a blocking heavyweight lock, and a demo of both."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Sequence


class LightweightLock:
    """A lock that is only ever tried, never waited for.

    ``lock`` makes one non-blocking attempt. ``is_locked`` then tells the
    calling thread whether that attempt succeeded and the thread still holds it.
    """

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._state = threading.local()

    def _held(self) -> bool:
        return getattr(self._state, "held", False)

    def lock(self) -> None:
        """Try once to take the lock and remember whether it worked."""
        if self._held():
            return
        self._state.held = self._mutex.acquire(blocking=False)

    def unlock(self) -> None:
        """Release the lock if the calling thread holds it; otherwise do nothing."""
        if self._held():
            self._state.held = False
            self._mutex.release()

    def is_locked(self) -> bool:
        """Return True if the calling thread's last attempt took the lock."""
        return self._held()


class HeavyweightLock:
    """A lock that blocks until it can be taken."""

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._state = threading.local()

    def lock(self) -> None:
        """Wait for the lock and take it."""
        if getattr(self._state, "held", False):
            return
        self._mutex.acquire()
        self._state.held = True

    def unlock(self) -> None:
        """Release the lock if the calling thread holds it; otherwise do nothing."""
        if getattr(self._state, "held", False):
            self._state.held = False
            self._mutex.release()

    def __enter__(self) -> HeavyweightLock:
        self.lock()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unlock()


def worker(
    light_lock: LightweightLock,
    heavy_lock: HeavyweightLock,
    worker_id: int,
    rounds: int = 10,
    hold: float = 10.0,
) -> list[str]:
    """Take the lightweight lock if free, else fall back to the heavyweight one.

    Each round holds whichever lock was taken for ``hold`` seconds. Every
    message is printed as it happens and all of them are returned.
    """
    messages: list[str] = []

    def report(message: str) -> None:
        messages.append(message)
        print(message, flush=True)

    for _ in range(rounds):
        light_lock.lock()
        if light_lock.is_locked():
            report(f"Thread {worker_id} acquired lightweight lock {id(light_lock):#x}")
            time.sleep(hold)
            light_lock.unlock()
        else:
            with heavy_lock:
                report(
                    f"Thread {worker_id} failed to acquire lightweight lock, "
                    "trying heavyweight lock."
                )
                report(f"Thread {worker_id} acquired heavyweight lock.")
                time.sleep(hold)
    return messages


def main(argv: Sequence[str] | None = None) -> int:
    """Run several workers contending for a lightweight and a heavyweight lock."""
    parser = argparse.ArgumentParser(description="Contend for a light and a heavy lock.")
    parser.add_argument("--threads", type=int, default=5, help="number of worker threads")
    parser.add_argument("--rounds", type=int, default=10, help="rounds per worker")
    parser.add_argument("--hold", type=float, default=10.0, help="seconds to hold a lock")
    args = parser.parse_args(argv)

    light_lock = LightweightLock()
    heavy_lock = HeavyweightLock()
    threads = [
        threading.Thread(
            target=worker,
            args=(light_lock, heavy_lock, worker_id, args.rounds, args.hold),
        )
        for worker_id in range(args.threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())