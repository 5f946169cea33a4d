import threading
from typing import Callable, Dict, Generic, Hashable, TypeVar

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')

class MemoCache(Generic[K, V]):
    """Lock-guarded memoization map.

    Entries live until ``clear``. ``get_or_create`` computes under a
    per-key lock, so concurrent callers for the same key see a single
    computation while other keys stay readable.
    """

    def __init__(self):
        self._cache: Dict[K, V] = {}
        self._key_locks: Dict[K, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        with self._lock:
            if key in self._cache:
                return self._cache[key]
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            with self._lock:
                if key in self._cache:
                    return self._cache[key]
            try:
                value = factory()
                with self._lock:
                    self._cache[key] = value
                return value
            finally:
                with self._lock:
                    if self._key_locks.get(key) is key_lock:
                        del self._key_locks[key]

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
