"""Unit tests for SiteManager process-level operations."""

import pytest

from solrsite.core.exceptions import InvalidConfigurationError
from solrsite.core.managers.site import Site


def test_get_site_is_cached(manager, page_repository):
    site = manager.get_site(2)
    queries = page_repository.record_queries

    assert manager.get_site(2) is site
    assert page_repository.record_queries == queries


def test_get_site_by_page_id_resolves_owning_root(manager):
    site = manager.get_site_by_page_id(4)

    assert site.get_root_page_id() == 2
    assert manager.get_site_by_page_id(5) is site


def test_get_site_by_page_id_without_root_raises(manager):
    with pytest.raises(InvalidConfigurationError):
        manager.get_site_by_page_id(9)


def test_available_sites_dedupe_and_skip_invalid(manager):
    sites = manager.get_available_sites()

    assert list(sites) == [2, 8]
    assert all(isinstance(site, Site) for site in sites.values())


def test_available_sites_strict_mode_raises(manager):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        manager.get_available_sites(stop_on_invalid_site=True)

    assert exc_info.value.root_page_id == 9


def test_available_sites_memoized_per_flag(manager, registry):
    manager.get_available_sites()
    reads = registry.reads

    assert list(manager.get_available_sites()) == [2, 8]
    assert registry.reads == reads

    # strict mode is computed separately and still sees the invalid entry
    with pytest.raises(InvalidConfigurationError):
        manager.get_available_sites(stop_on_invalid_site=True)


def test_available_sites_strict_mode_succeeds_without_invalid_entries(manager, registry):
    registry.set("tx_solr", "servers", {"8|0": {"rootPageUid": 8}, "2|0": {"rootPageUid": 2}})

    sites = manager.get_available_sites(stop_on_invalid_site=True)

    assert list(sites) == [8, 2]


def test_available_sites_ignores_entries_without_root(manager, registry):
    registry.set("tx_solr", "servers", {"2|0": {"rootPageUid": 2}, "x": {"language": 0}, "y": "z"})

    assert list(manager.get_available_sites()) == [2]


def test_available_sites_empty_registry(manager, registry):
    registry.remove("tx_solr", "servers")

    assert manager.get_available_sites() == {}
    assert manager.get_first_available_site() is None


def test_first_available_site(manager):
    site = manager.get_first_available_site()

    assert site is not None
    assert site.get_root_page_id() == 2


def test_clear_sites_cache_rebuilds_sites(manager, registry):
    first = manager.get_site(2)
    manager.get_available_sites()

    manager.clear_sites_cache()
    registry.set("tx_solr", "servers", {"8|0": {"rootPageUid": 8}})

    assert manager.get_site(2) is not first
    assert list(manager.get_available_sites()) == [8]


def test_clear_site_pages_cache_keeps_sites(manager, page_repository):
    site = manager.get_site(2)
    site.get_pages()
    queries = page_repository.child_queries

    manager.clear_site_pages_cache()
    site.get_pages()

    assert page_repository.child_queries > queries
    assert manager.get_site(2) is site


def test_selector_marks_selected_site(manager):
    selected = manager.get_site(8)

    selector = manager.get_available_sites_selector("site", selected)

    assert selector.name == "site"
    assert [(o.value, o.label, o.selected) for o in selector.options] == [
        (2, "Main Site, Root Page ID: 2", False),
        (8, ", Root Page ID: 8", True),
    ]
    assert selector.selected is not None
    assert selector.selected.value == 8


def test_selector_without_selection(manager):
    selector = manager.get_available_sites_selector("site")

    assert not any(option.selected for option in selector.options)
    assert selector.selected is None


def test_servers_from_registry_non_mapping_is_ignored(manager, registry):
    registry.set("tx_solr", "servers", ["2|0"])

    assert manager.get_servers_from_registry() == {}
