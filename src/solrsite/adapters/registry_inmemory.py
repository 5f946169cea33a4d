import threading
from copy import deepcopy
from typing import Any, Dict, Tuple

from solrsite.core.interfaces.registry import RegistryPort


class InMemoryRegistry(RegistryPort):
    def __init__(self, entries: Dict[Tuple[str, str], Any] | None = None) -> None:
        self._entries: Dict[Tuple[str, str], Any] = deepcopy(entries or {})
        self._lock = threading.Lock()
        self.reads = 0

    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        with self._lock:
            self.reads += 1
            if (namespace, key) not in self._entries:
                return default
            return deepcopy(self._entries[(namespace, key)])

    def set(self, namespace: str, key: str, value: Any) -> None:
        with self._lock:
            self._entries[(namespace, key)] = deepcopy(value)

    def remove(self, namespace: str, key: str) -> None:
        with self._lock:
            self._entries.pop((namespace, key), None)
