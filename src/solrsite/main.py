# main.py
from rich import print

from solrsite.adapters.configuration_static_adapter import StaticConfigurationAdapter
from solrsite.adapters.frontend_static_adapter import StaticFrontendAdapter
from solrsite.adapters.logging_adapter import LoggingAdapter
from solrsite.adapters.page_repository_inmemory import InMemoryPageRepository
from solrsite.adapters.page_repository_sqlalchemy import SqlAlchemyPageRepository
from solrsite.adapters.registry_file_adapter import RegistryFileAdapter
from solrsite.adapters.registry_inmemory import InMemoryRegistry
from solrsite.adapters.retry_tenacity import TenacityRetryAdapter
from solrsite.core.config import SiteManagerConfig
from solrsite.core.logging_config import configure_logging
from solrsite.core.managers.site_manager import SiteManager
from solrsite.core.settings import SolrSiteSettings, app_settings, get_logger, set_logger


# main lives at the outermost layer (not in core)
# Instantiates all the concrete adapters
# Wires dependencies together

def build_site_manager(settings: SolrSiteSettings = app_settings) -> SiteManager:
    if settings.SOLRSITE_DATABASE_URL:
        from sqlalchemy.exc import OperationalError

        retry = TenacityRetryAdapter(
            attempts=settings.SOLRSITE_DB_RETRY_ATTEMPTS,
            wait_initial=0.15,
            wait_max=1.2,
            exception_types=(OperationalError,),
        )
        pages = SqlAlchemyPageRepository(settings.SOLRSITE_DATABASE_URL, retry=retry)
    elif settings.SOLRSITE_CONTENT_FILE:
        pages = InMemoryPageRepository.from_yaml(settings.SOLRSITE_CONTENT_FILE)
    else:
        get_logger().warning("No page source configured; using an empty page tree")
        pages = InMemoryPageRepository()

    if settings.SOLRSITE_REGISTRY_FILE:
        registry = RegistryFileAdapter(str(settings.SOLRSITE_REGISTRY_FILE))
    else:
        registry = InMemoryRegistry()

    if settings.SOLRSITE_CONFIGURATION_FILE:
        configuration = StaticConfigurationAdapter.from_yaml(settings.SOLRSITE_CONFIGURATION_FILE)
    else:
        configuration = StaticConfigurationAdapter()

    return SiteManager(
        page_repository=pages,
        domain_resolver=pages,
        registry=registry,
        configuration=configuration,
        frontend=StaticFrontendAdapter(configuration),
        config=SiteManagerConfig.from_app_settings(settings),
    )


def main():
    configure_logging(app_settings.SOLRSITE_LOG_LEVEL)
    set_logger(LoggingAdapter("solrsite", app_settings.SOLRSITE_LOG_LEVEL))
    app_settings.print_settings(get_logger())

    manager = build_site_manager(app_settings)
    sites = manager.get_available_sites()
    if not sites:
        get_logger().warning("No sites with search connections configured")
    for site in sites.values():
        summary = site.to_dict()
        summary["siteHash"] = site.get_site_hash()
        summary["pageCount"] = len(site.get_pages())
        print(summary)


if __name__ == "__main__":
    main()
