import pytest

from solrsite.adapters.registry_file_adapter import RegistryFileAdapter
from solrsite.core.exceptions import RegistryError

REGISTRY_YAML = """\
tx_solr:
  servers:
    "2|0":
      rootPageUid: 2
      language: 0
      solrHost: solr.local
    "2|1":
      rootPageUid: 2
      language: 1
"""


@pytest.fixture
def registry_file(tmp_path):
    path = tmp_path / "registry.yaml"
    path.write_text(REGISTRY_YAML, encoding="utf-8")
    return path


def test_loads_servers(registry_file):
    registry = RegistryFileAdapter(str(registry_file))

    servers = registry.get("tx_solr", "servers", {})

    assert list(servers) == ["2|0", "2|1"]
    assert servers["2|0"]["rootPageUid"] == 2
    assert servers["2|0"]["solrHost"] == "solr.local"
    assert servers["2|1"]["solrPort"] == 8983


def test_missing_key_returns_default(registry_file):
    registry = RegistryFileAdapter(str(registry_file))

    assert registry.get("tx_solr", "other", "fallback") == "fallback"
    assert registry.get("unknown", "servers", {}) == {}


def test_returned_values_are_copies(registry_file):
    registry = RegistryFileAdapter(str(registry_file))

    registry.get("tx_solr", "servers")["2|0"]["rootPageUid"] = 99

    assert registry.get("tx_solr", "servers")["2|0"]["rootPageUid"] == 2


def test_missing_file_is_empty_in_lenient_mode(tmp_path):
    registry = RegistryFileAdapter(str(tmp_path / "missing.yaml"))

    assert registry.get("tx_solr", "servers", {}) == {}


def test_missing_file_raises_in_strict_mode(tmp_path):
    with pytest.raises(RegistryError):
        RegistryFileAdapter(str(tmp_path / "missing.yaml"), strict=True)


def test_invalid_reload_keeps_previous_state(registry_file):
    registry = RegistryFileAdapter(str(registry_file))

    registry_file.write_text('tx_solr:\n  servers:\n    "bad": {}\n', encoding="utf-8")
    registry.load()

    assert list(registry.get("tx_solr", "servers")) == ["2|0", "2|1"]



def test_file_is_the_only_source_of_entries(registry_file):
    registry = RegistryFileAdapter(str(registry_file))
    registry_file.write_text('tx_solr:\n  servers:\n    "8|0":\n      rootPageUid: 8\n', encoding="utf-8")

    assert not hasattr(registry, "set")
    assert list(registry.get("tx_solr", "servers", {})) == ["2|0", "2|1"]

    registry.load()

    assert list(registry.get("tx_solr", "servers", {})) == ["8|0"]
