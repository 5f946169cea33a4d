"""Read-only access to a nested configuration tree.

Paths are dotted (``"plugin.tx_solr.index.queue.pages"``). A trailing dot on
a segment, as used by TypoScript array keys (``"config."``), is accepted and
ignored.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping

_MISSING = object()

INITIAL_PAGES_ADDITIONAL_WHERE_CLAUSE_PATH = (
    "plugin.tx_solr.index.queue.pages.initialPagesAdditionalWhereClause"
)


class TypoScriptConfiguration:
    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = deepcopy(dict(data or {}))

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        if not path:
            return node
        for segment in path.split("."):
            if segment == "":
                continue
            if not isinstance(node, Mapping):
                return _MISSING
            if segment in node:
                node = node[segment]
            elif f"{segment}." in node:
                node = node[f"{segment}."]
            else:
                return _MISSING
        return node

    def get_value_by_path_or_default(self, path: str, default: Any) -> Any:
        """Return the value at ``path`` or ``default`` when absent or empty."""
        value = self._lookup(path)
        if value is _MISSING or value is None or value == "":
            return default
        return deepcopy(value)

    def get_object_by_path(self, path: str) -> TypoScriptConfiguration:
        """Return the sub-tree at ``path`` as its own configuration."""
        value = self._lookup(path)
        if not isinstance(value, Mapping):
            return TypoScriptConfiguration()
        return TypoScriptConfiguration(value)

    def get_initial_pages_additional_where_clause(self) -> str:
        clause = self.get_value_by_path_or_default(INITIAL_PAGES_ADDITIONAL_WHERE_CLAUSE_PATH, "")
        return str(clause).strip()

    def to_dict(self) -> dict[str, Any]:
        return deepcopy(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypoScriptConfiguration):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"TypoScriptConfiguration({self._data!r})"
