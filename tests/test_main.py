from solrsite.adapters.page_repository_inmemory import InMemoryPageRepository
from solrsite.adapters.registry_file_adapter import RegistryFileAdapter
from solrsite.core.settings import SolrSiteSettings
from solrsite.main import build_site_manager


def test_build_site_manager_from_yaml_sources(tmp_path):
    content = tmp_path / "content.yaml"
    content.write_text(
        "pages:\n"
        "  - {uid: 1, pid: 0, title: Home, is_siteroot: true}\n"
        "  - {uid: 2, pid: 1, title: News}\n",
        encoding="utf-8",
    )
    registry = tmp_path / "registry.yaml"
    registry.write_text('tx_solr:\n  servers:\n    "1|0": {rootPageUid: 1, language: 0}\n', encoding="utf-8")

    settings = SolrSiteSettings(
        SOLRSITE_CONTENT_FILE=content,
        SOLRSITE_REGISTRY_FILE=registry,
        SOLRSITE_ENCRYPTION_KEY="secret",
        SOLRSITE_PAGES_MAX_DEPTH=1,
    )
    manager = build_site_manager(settings)

    assert isinstance(manager.page_repository, InMemoryPageRepository)
    assert isinstance(manager.registry, RegistryFileAdapter)
    assert manager.config.default_max_depth == 1
    site = manager.get_first_available_site()
    assert site is not None
    assert site.get_pages() == [1, 2]
    assert site.get_languages() == [0]


def test_build_site_manager_without_sources():
    manager = build_site_manager(SolrSiteSettings())

    assert manager.get_available_sites() == {}
