"""A consistent-hashing ring of virtual cache nodes."""

from __future__ import annotations

import bisect
import hashlib
from dataclasses import dataclass


@dataclass
class CacheServer:
    """A virtual node on the ring, belonging to a real node."""

    node_name: str
    vnode_name: str
    cache_size: int = 0

    def add_cache(self) -> None:
        """Record one more key placed on this virtual node."""
        self.cache_size += 1


def _hash(key: str) -> int:
    return int.from_bytes(hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest(), "big")


def _vnode_name(node: str, index: int) -> str:
    return f"{node}#{index}"


class ConsistentHashing:
    """Maps keys to virtual nodes on a hash ring."""

    def __init__(self, replicas: int) -> None:
        self.replicas = replicas
        self._ring: dict[int, CacheServer] = {}
        self._sorted_hashes: list[int] = []

    def __len__(self) -> int:
        return len(self._ring)

    def _rebuild(self) -> None:
        self._sorted_hashes = sorted(self._ring)

    def add_node(self, node: str, v_node_size: int) -> None:
        """Place ``v_node_size`` virtual nodes of ``node`` on the ring."""
        for index in range(v_node_size):
            vnode = _vnode_name(node, index)
            self._ring[_hash(vnode)] = CacheServer(node, vnode)
        self._rebuild()

    def remove_node(self, node: str) -> None:
        """Remove the first ``replicas`` virtual nodes of ``node`` from the ring."""
        for index in range(self.replicas):
            self._ring.pop(_hash(_vnode_name(node, index)), None)
        self._rebuild()

    def get_node(self, key: str) -> str:
        """Return the virtual node name that ``key`` maps to, counting the placement."""
        if not self._sorted_hashes:
            raise LookupError("the hash ring has no nodes")
        position = bisect.bisect_left(self._sorted_hashes, _hash(key))
        if position == len(self._sorted_hashes):
            position = 0
        server = self._ring[self._sorted_hashes[position]]
        server.add_cache()
        return server.vnode_name

    def cache_distribution(self) -> dict[str, int]:
        """Return the number of keys placed on each real node."""
        totals: dict[str, int] = {}
        for server in self._ring.values():
            totals[server.node_name] = totals.get(server.node_name, 0) + server.cache_size
        return totals


def main(argv: list[str] | None = None) -> int:
    """Spread a batch of keys over two nodes and report where they landed."""
    ring = ConsistentHashing(3)
    ring.add_node("127.0.0.1:6379", 5)
    ring.add_node("127.0.0.1:16379", 5)

    for i in range(2000):
        key = f"cache-key-{i}"
        print(f"Key '{key}' is on node: {ring.get_node(key)}")

    for node, count in ring.cache_distribution().items():
        print(f"cache node: {node} has {count} caches;")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())