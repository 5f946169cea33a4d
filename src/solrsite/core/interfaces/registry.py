from abc import ABC, abstractmethod
from typing import Any


class RegistryPort(ABC):
    @abstractmethod
    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        """Return the value stored under namespace/key or ``default``."""
        pass
