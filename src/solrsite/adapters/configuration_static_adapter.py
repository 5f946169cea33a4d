from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from solrsite.core.interfaces.configuration import ConfigurationPort
from solrsite.core.models.configuration import TypoScriptConfiguration


def _merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


class StaticConfigurationAdapter(ConfigurationPort):
    """Configuration from a fixed mapping.

    ``defaults`` apply to every page; ``per_root_page`` entries are merged on
    top for pages whose uid matches (sites are addressed by their root page).
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, Any]] = None,
        per_root_page: Optional[Mapping[int, Mapping[str, Any]]] = None,
    ) -> None:
        self._defaults: Dict[str, Any] = deepcopy(dict(defaults or {}))
        self._per_root_page: Dict[int, Dict[str, Any]] = {
            int(uid): deepcopy(dict(values)) for uid, values in (per_root_page or {}).items()
        }
        self.requests = 0

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StaticConfigurationAdapter":
        """Load ``defaults`` and ``sites`` (uid -> configuration) from a YAML file."""
        with open(path, encoding="UTF-8") as file:
            content = yaml.safe_load(file) or {}
        return cls(defaults=content.get("defaults"), per_root_page=content.get("sites"))

    def get_configuration_from_page_id(self, page_id: int, path: str = "") -> TypoScriptConfiguration:
        self.requests += 1
        data = _merge(self._defaults, self._per_root_page.get(int(page_id), {}))
        configuration = TypoScriptConfiguration(data)
        if path:
            return configuration.get_object_by_path(path)
        return configuration
