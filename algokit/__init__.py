"""LRU, LFU and expiring caches, a consistent hash ring, try-once and blocking locks,
array puzzles, and memory alignment helpers."""

__version__ = "0.1.0"