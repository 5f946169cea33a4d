"""Shared test fixtures.

Page tree used throughout::

    1 World (folder)
    └── 2 Main Site (site root, domains example.org / www.example.org)
        ├── 3 About
        │   └── 4 Team
        ├── 5 Contact
        ├── 6 Old (deleted)
        └── 7 Storage (doktype 254)
    8 Other Site (site root, no domain)
    9 Plain Page (not a site root)
"""

import pytest

from solrsite.adapters.configuration_static_adapter import StaticConfigurationAdapter
from solrsite.adapters.frontend_static_adapter import StaticFrontendAdapter
from solrsite.adapters.page_repository_inmemory import InMemoryPageRepository
from solrsite.adapters.registry_inmemory import InMemoryRegistry
from solrsite.core.config import SiteManagerConfig
from solrsite.core.managers.site_manager import SiteManager

PAGES = [
    {"uid": 1, "pid": 0, "title": "World"},
    {"uid": 2, "pid": 1, "title": "Main Site", "is_siteroot": True},
    {"uid": 3, "pid": 2, "title": "About"},
    {"uid": 4, "pid": 3, "title": "Team"},
    {"uid": 5, "pid": 2, "title": "Contact"},
    {"uid": 6, "pid": 2, "title": "Old", "deleted": True},
    {"uid": 7, "pid": 2, "title": "Storage", "doktype": 254},
    {"uid": 8, "pid": 0, "title": "Other Site", "is_siteroot": True},
    {"uid": 9, "pid": 0, "title": "Plain Page"},
]

DOMAINS = [
    {"uid": 1, "pid": 2, "domainName": "www.example.org", "sorting": 20},
    {"uid": 2, "pid": 2, "domainName": "example.org", "sorting": 10},
    {"uid": 3, "pid": 1, "domainName": "world.example", "sorting": 10, "hidden": True},
]

SERVERS = {
    "2|0": {"rootPageUid": 2, "language": 0},
    "2|1": {"rootPageUid": 2, "language": 1},
    "8|0": {"rootPageUid": 8, "language": 0},
    "9|0": {"rootPageUid": 9, "language": 0},
}

EXCLUDE_STORAGE = "AND doktype <> 254"


@pytest.fixture
def page_repository():
    return InMemoryPageRepository(
        pages=PAGES,
        domains=DOMAINS,
        clause_filters={EXCLUDE_STORAGE: lambda page: page.doktype != 254},
    )


@pytest.fixture
def registry():
    return InMemoryRegistry({("tx_solr", "servers"): SERVERS})


@pytest.fixture
def configuration():
    return StaticConfigurationAdapter(
        per_root_page={
            2: {
                "config": {
                    "sys_language_uid": 1,
                    "defaultGetVars": {"L": 2},
                    "sys_language_mode": "content_fallback",
                },
            },
        },
    )


@pytest.fixture
def frontend(configuration):
    return StaticFrontendAdapter(configuration)


@pytest.fixture
def manager_config():
    return SiteManagerConfig(encryption_key="secret")


@pytest.fixture
def manager(page_repository, registry, configuration, frontend, manager_config):
    return SiteManager(
        page_repository=page_repository,
        domain_resolver=page_repository,
        registry=registry,
        configuration=configuration,
        frontend=frontend,
        config=manager_config,
    )
