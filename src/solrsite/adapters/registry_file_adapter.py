import threading
from copy import deepcopy
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from solrsite.core.exceptions import RegistryError
from solrsite.core.interfaces.registry import RegistryPort
from solrsite.core.models.connection import SolrConnection, split_connection_key
from solrsite.core.settings import get_logger


class RegistryFileAdapter(RegistryPort):
    """Registry read from a YAML file of the form::

        tx_solr:
          servers:
            "1|0":
              rootPageUid: 1
              language: 0
              solrHost: solr.local

    Entries of the ``servers`` key are validated as SolrConnection records.
    A failed (re)load keeps the previously loaded state.
    """

    SERVERS_KEY = "servers"

    def __init__(self, config_path: str, strict: bool = False):
        self._config_path = config_path
        self._lock = threading.Lock()
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._strict = strict

        self.load()

    def _atomic_update(self, new_entries: Dict[str, Dict[str, Any]]):
        with self._lock:
            self._entries = deepcopy(new_entries)

    def _validate(self, content: Any) -> Dict[str, Dict[str, Any]]:
        if not isinstance(content, dict):
            raise ValueError("registry file must contain a mapping of namespaces")
        entries: Dict[str, Dict[str, Any]] = {}
        for namespace, values in content.items():
            if not isinstance(values, dict):
                raise ValueError(f"namespace '{namespace}' must be a mapping")
            entries[str(namespace)] = dict(values)
            servers = values.get(self.SERVERS_KEY)
            if servers is None:
                continue
            if not isinstance(servers, dict):
                raise ValueError(f"'{namespace}.{self.SERVERS_KEY}' must be a mapping")
            validated = {}
            for connection_key, server in servers.items():
                split_connection_key(connection_key)
                validated[str(connection_key)] = SolrConnection.model_validate(server).model_dump(by_alias=True)
            entries[str(namespace)][self.SERVERS_KEY] = validated
        return entries

    def load(self) -> None:
        """(Re)load the registry file."""
        get_logger().info("(Re)Loading registry from %s", self._config_path)

        try:
            with open(self._config_path, encoding="UTF-8") as file:
                content = yaml.safe_load(file)
            self._atomic_update(self._validate(content or {}))
            get_logger().info("Registry (re)loaded successfully")
        except FileNotFoundError as e:
            get_logger().error("Registry file not found: %s", self._config_path)
            if self._strict:
                raise RegistryError(self._config_path, diagnostic=str(e)) from e
        except (yaml.YAMLError, ValidationError, ValueError) as e:
            get_logger().error("Invalid registry file %s: %s", self._config_path, e)
            if self._strict:
                raise RegistryError(self._config_path, diagnostic=str(e)) from e

    def get(self, namespace: str, key: str, default: Any = None) -> Any:
        with self._lock:
            values = self._entries.get(namespace, {})
            if key not in values:
                return default
            return deepcopy(values[key])
