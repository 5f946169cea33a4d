# solrsite/core/managers/site_manager.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from solrsite.core.config import SiteManagerConfig
from solrsite.core.exceptions import InvalidConfigurationError
from solrsite.core.interfaces.configuration import ConfigurationPort
from solrsite.core.interfaces.domain import DomainResolverPort
from solrsite.core.interfaces.frontend import FrontendPort
from solrsite.core.interfaces.page_repository import PageRepositoryPort
from solrsite.core.interfaces.registry import RegistryPort
from solrsite.core.managers.memo_cache import MemoCache
from solrsite.core.managers.site import PagesCacheKey, Site
from solrsite.core.models.site_selector import SiteOption, SiteSelector
from solrsite.core.settings import get_logger


class SiteManager:
    """Lifecycle-scoped context for site resolution.

    Owns the collaborators every ``Site`` needs plus the caches shared by
    them: sites by root page id, page id lists, and the available sites.
    Build one per application run (or per batch) in the composition root;
    tests build their own to stay isolated.
    """

    def __init__(
        self,
        page_repository: PageRepositoryPort,
        domain_resolver: DomainResolverPort,
        registry: RegistryPort,
        configuration: ConfigurationPort,
        frontend: FrontendPort,
        config: SiteManagerConfig | None = None,
    ) -> None:
        self.page_repository = page_repository
        self.domain_resolver = domain_resolver
        self.registry = registry
        self.configuration = configuration
        self.frontend = frontend
        self.config = config or SiteManagerConfig()

        self.sites_cache: MemoCache[int, Site] = MemoCache()
        self.pages_cache: MemoCache[PagesCacheKey, List[int]] = MemoCache()
        # keyed by the stop_on_invalid_site flag
        self._available_sites: MemoCache[bool, Dict[int, Site]] = MemoCache()

    def get_site(self, root_page_id: int) -> Site:
        """Return the cached Site for a root page id, constructing it if absent."""
        root_page_id = int(root_page_id)
        return self.sites_cache.get_or_create(root_page_id, lambda: Site(root_page_id, self))

    def get_site_by_page_id(self, page_id: int) -> Site:
        """Get the Site a page belongs to."""
        root_page_id = self.page_repository.get_root_page_id(int(page_id))
        return self.get_site(root_page_id)

    def get_servers_from_registry(self) -> Dict[str, Any]:
        """Retrieve the configured search connections from the registry."""
        servers = self.registry.get(
            self.config.registry_namespace, self.config.registry_servers_key, {}
        )
        if not servers:
            return {}
        if not isinstance(servers, Mapping):
            get_logger().warning(
                "Registry entry %s/%s is not a mapping; ignoring it",
                self.config.registry_namespace,
                self.config.registry_servers_key,
            )
            return {}
        return dict(servers)

    def get_available_sites(self, stop_on_invalid_site: bool = False) -> Dict[int, Site]:
        """Get all sites with search connections configured, keyed by root page id.

        Args:
            stop_on_invalid_site: re-raise InvalidConfigurationError for a
                registry entry whose root page is not a site root instead of
                skipping it.
        """
        sites = self._available_sites.get_or_create(
            bool(stop_on_invalid_site), lambda: self._collect_available_sites(stop_on_invalid_site)
        )
        return dict(sites)

    def _collect_available_sites(self, stop_on_invalid_site: bool) -> Dict[int, Site]:
        sites: Dict[int, Site] = {}
        for connection_key, server in self.get_servers_from_registry().items():
            root_page_uid = self._root_page_uid_of(connection_key, server)
            if root_page_uid is None or root_page_uid in sites:
                continue
            try:
                sites[root_page_uid] = self.get_site(root_page_uid)
            except InvalidConfigurationError as e:
                if stop_on_invalid_site:
                    raise
                get_logger().warning("Skipping invalid site %s: %s", root_page_uid, e.message)
        get_logger().debug("Resolved %d available sites", len(sites))
        return sites

    @staticmethod
    def _root_page_uid_of(connection_key: str, server: Any) -> Optional[int]:
        if isinstance(server, Mapping) and server.get("rootPageUid") is not None:
            try:
                return int(server["rootPageUid"])
            except (TypeError, ValueError):
                pass
        get_logger().warning("Registry entry %r has no usable rootPageUid", connection_key)
        return None

    def get_first_available_site(self, stop_on_invalid_site: bool = False) -> Optional[Site]:
        sites = self.get_available_sites(stop_on_invalid_site)
        return next(iter(sites.values()), None)

    def get_available_sites_selector(self, name: str, selected_site: Optional[Site] = None) -> SiteSelector:
        """Selection data for a dropdown of all available sites."""
        options = [
            SiteOption(
                value=site.get_root_page_id(),
                label=site.get_label(),
                selected=selected_site is not None
                and site.get_root_page_id() == selected_site.get_root_page_id(),
            )
            for site in self.get_available_sites().values()
        ]
        return SiteSelector(name=name, options=options)

    def clear_site_pages_cache(self) -> None:
        self.pages_cache.clear()

    def clear_sites_cache(self) -> None:
        """Drop all constructed sites and the available sites memo."""
        self.sites_cache.clear()
        self._available_sites.clear()
