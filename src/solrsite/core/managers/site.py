# solrsite/core/managers/site.py
from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, List, Optional, Tuple

from solrsite.core.exceptions import InvalidConfigurationError
from solrsite.core.logging_config import site_root_context
from solrsite.core.models.configuration import TypoScriptConfiguration
from solrsite.core.models.connection import split_connection_key
from solrsite.core.models.page import PageRecord
from solrsite.core.settings import get_logger
from solrsite.core.utils.site_hash import get_site_hash_for_domain

if TYPE_CHECKING:
    from solrsite.core.managers.site_manager import SiteManager

# Marker for get_pages: start at the site's own root page and include it
SITE_ROOT = "SITE_ROOT"

PagesCacheKey = Tuple[int, Any, int]


class Site:
    """A site is a branch of the page tree. Each site's root page is marked
    by the ``is_siteroot`` flag.

    Sites are normally obtained through a ``SiteManager``, which owns the
    collaborators and the caches shared by all sites of one run.
    """

    def __init__(self, root_page_id: int, manager: SiteManager) -> None:
        """
        Args:
            root_page_id: Site root page uid. The page must be flagged as site root.
            manager: Context providing ports, configuration and caches.

        Raises:
            InvalidConfigurationError: if the page is missing or not flagged as site root.
        """
        self._manager = manager
        page = manager.page_repository.get_record(int(root_page_id))
        if page is None or not page.is_siteroot:
            raise InvalidConfigurationError(
                int(root_page_id),
                diagnostic="page not found" if page is None else "is_siteroot is not set",
            )
        self._root_page: PageRecord = page.model_copy(deep=True)
        # None until resolved; "" is a valid resolved mode
        self._sys_language_mode: Optional[str] = None
        self._initial_pages_where_clause: Optional[str] = None
        # guards the two lazily resolved fields above
        self._lazy_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Site(root_page_id={self.root_page_id}, title={self.get_title()!r})"

    @property
    def root_page_id(self) -> int:
        return self._root_page.uid

    def get_root_page_id(self) -> int:
        return self._root_page.uid

    def get_root_page(self) -> PageRecord:
        """Return a copy of the root page record."""
        return self._root_page.model_copy(deep=True)

    def get_title(self) -> str:
        return self._root_page.title

    def get_label(self) -> str:
        """Build the site's label from the rootline titles and the root page id.

        The topmost rootline page is treated as the installation root and
        left out, so a site directly below it is labelled by its own title
        only. Remaining titles read from the top of the tree down to the
        root page.
        """
        rootline = self._manager.page_repository.get_rootline(self.root_page_id)[:-1]
        titles = [page.title for page in reversed(rootline)]
        return " - ".join(titles) + f", Root Page ID: {self.root_page_id}"

    def get_solr_configuration(self) -> TypoScriptConfiguration:
        return self._manager.configuration.get_configuration_from_page_id(self.root_page_id)

    def get_languages(self) -> List[int]:
        """Language ids for which search connections are configured on this site."""
        languages: List[int] = []
        for connection_key in self._manager.get_servers_from_registry():
            try:
                site_root_page_id, language_id = split_connection_key(connection_key)
            except ValueError:
                get_logger().warning("Skipping malformed registry key %r", connection_key)
                continue
            if site_root_page_id == self.root_page_id and language_id not in languages:
                languages.append(language_id)
        return languages

    def get_default_language(self) -> int:
        """The site's default language as configured in ``config.sys_language_uid``.

        A ``config.defaultGetVars.L`` value overrules it; 0 is assumed when
        neither is set.
        """
        configuration = self._manager.configuration.get_configuration_from_page_id(
            self.root_page_id, "config"
        )
        default_language = configuration.get_value_by_path_or_default("sys_language_uid", 0)
        default_language = configuration.get_value_by_path_or_default("defaultGetVars.L", default_language)
        try:
            return int(default_language)
        except (TypeError, ValueError):
            get_logger().warning(
                "Non-numeric default language %r for site %s; using 0", default_language, self.root_page_id
            )
            return 0

    def get_pages(self, root_page_id: int | str = SITE_ROOT, max_depth: Optional[int] = None) -> List[int]:
        """Generate the list of page ids in this site. All page types are
        included, deleted pages are not.

        Args:
            root_page_id: Page to start collecting sub pages from, or ``SITE_ROOT``
                to start at (and include) the site's root page.
            max_depth: Maximum depth to descend into the tree; defaults to the
                manager's configured depth.
        """
        if max_depth is None:
            max_depth = self._manager.config.default_max_depth
        max_depth = int(max_depth)
        cache_key: PagesCacheKey = (self.root_page_id, root_page_id, max_depth)

        cached = self._manager.pages_cache.get_or_create(
            cache_key, lambda: self._collect_page_ids(root_page_id, max_depth)
        )
        return list(cached)

    def _collect_page_ids(self, root_page_id: int | str, max_depth: int) -> List[int]:
        page_ids: List[int] = []
        if root_page_id == SITE_ROOT:
            start = self.root_page_id
            page_ids.append(start)
        else:
            start = int(root_page_id)

        if max_depth <= 0:
            return page_ids

        where_clause = self._get_initial_pages_where_clause()
        repository = self._manager.page_repository
        queue: Deque[Tuple[int, int]] = deque([(start, max_depth)])
        with site_root_context(self.root_page_id):
            while queue:
                parent_id, remaining_depth = queue.popleft()
                for child_id in repository.get_child_page_ids(parent_id, where_clause):
                    page_ids.append(child_id)
                    if remaining_depth > 1:
                        queue.append((child_id, remaining_depth - 1))
            get_logger().debug(
                "Collected %d page ids below %s (max depth %d)", len(page_ids), start, max_depth
            )
        return page_ids

    def _get_initial_pages_where_clause(self) -> str:
        with self._lazy_lock:
            if self._initial_pages_where_clause is None:
                self._initial_pages_where_clause = (
                    self.get_solr_configuration().get_initial_pages_additional_where_clause()
                )
        return self._initial_pages_where_clause

    def get_site_hash(self) -> str:
        """The site's unique hash, built from its main domain, the encryption
        key and the hash namespace."""
        config = self._manager.config
        return get_site_hash_for_domain(
            self.get_domain(),
            config.encryption_key.get_secret_value(),
            config.site_hash_namespace,
        )

    def get_domain(self) -> str:
        """The site's main domain: the first domain record in the rootline."""
        rootline = self._manager.page_repository.get_rootline(self.root_page_id)
        return self._manager.domain_resolver.first_domain(rootline)

    def get_sys_language_mode(self) -> str:
        with self._lazy_lock:
            if self._sys_language_mode is None:
                with site_root_context(self.root_page_id):
                    context = self._manager.frontend.initialize(self.root_page_id)
                self._sys_language_mode = context.sys_language_mode
        return self._sys_language_mode

    def to_dict(self) -> Dict[str, Any]:
        """Serializable summary of the site's static metadata."""
        return {
            "rootPageId": self.root_page_id,
            "title": self.get_title(),
            "label": self.get_label(),
            "domain": self.get_domain(),
            "languages": self.get_languages(),
            "defaultLanguage": self.get_default_language(),
        }
