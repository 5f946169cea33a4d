"""In-memory implementation of PageRepositoryPort and DomainResolverPort.

Thread-safe using a threading.Lock. Suitable for TDD, local tests and small
YAML-described page trees. Records are copied in and out so callers never
share state with the store.
"""
from __future__ import annotations

import threading
from copy import deepcopy
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

import yaml

from solrsite.core.interfaces.domain import DomainResolverPort
from solrsite.core.interfaces.page_repository import PageRepositoryPort
from solrsite.core.models.page import DomainRecord, PageRecord

PageFilter = Callable[[PageRecord], bool]


class InMemoryPageRepository(PageRepositoryPort, DomainResolverPort):
    def __init__(
        self,
        pages: Iterable[PageRecord | Mapping] = (),
        domains: Iterable[DomainRecord | Mapping] = (),
        clause_filters: Optional[Mapping[str, PageFilter]] = None,
    ) -> None:
        """
        Args:
            pages: Page records or mappings validated into PageRecord.
            domains: Domain records or mappings validated into DomainRecord.
            clause_filters: Predicates standing in for SQL where clauses; a
                clause passed to ``get_child_page_ids`` must be registered here.
        """
        self._pages: Dict[int, PageRecord] = {}
        self._domains: List[DomainRecord] = []
        self._clause_filters: Dict[str, PageFilter] = dict(clause_filters or {})
        self._lock = threading.Lock()
        # counters are read by tests to observe memoization upstream
        self.child_queries = 0
        self.record_queries = 0
        for page in pages:
            self.add_page(page)
        for domain in domains:
            self.add_domain(domain)

    @classmethod
    def from_yaml(cls, path: str | Path) -> InMemoryPageRepository:
        """Load pages and domains from a YAML file with ``pages`` and ``domains`` lists."""
        with open(path, encoding="UTF-8") as file:
            content = yaml.safe_load(file) or {}
        return cls(pages=content.get("pages", []), domains=content.get("domains", []))

    def add_page(self, page: PageRecord | Mapping) -> PageRecord:
        record = page if isinstance(page, PageRecord) else PageRecord.model_validate(page)
        with self._lock:
            self._pages[record.uid] = record.model_copy(deep=True)
        return record

    def add_domain(self, domain: DomainRecord | Mapping) -> DomainRecord:
        record = domain if isinstance(domain, DomainRecord) else DomainRecord.model_validate(domain)
        with self._lock:
            self._domains.append(record.model_copy(deep=True))
        return record

    def register_clause(self, clause: str, predicate: PageFilter) -> None:
        with self._lock:
            self._clause_filters[clause.strip()] = predicate

    def get_record(self, uid: int) -> Optional[PageRecord]:
        with self._lock:
            self.record_queries += 1
            page = self._pages.get(uid)
            return page.model_copy(deep=True) if page else None

    def get_rootline(self, uid: int) -> List[PageRecord]:
        with self._lock:
            rootline: List[PageRecord] = []
            seen: set[int] = set()
            current = self._pages.get(uid)
            while current is not None and not current.deleted and current.uid not in seen:
                rootline.append(current.model_copy(deep=True))
                seen.add(current.uid)
                if current.pid == 0:
                    break
                current = self._pages.get(current.pid)
            return rootline

    def get_child_page_ids(self, parent_uid: int, additional_where_clause: str = "") -> List[int]:
        clause = additional_where_clause.strip()
        with self._lock:
            self.child_queries += 1
            predicate = None
            if clause:
                predicate = self._clause_filters.get(clause)
                if predicate is None:
                    raise ValueError(f"No filter registered for where clause '{clause}'")
            return [
                page.uid
                for page in sorted(self._pages.values(), key=lambda p: (p.sorting, p.uid))
                if page.pid == parent_uid
                and not page.deleted
                and (predicate is None or predicate(page))
            ]

    def get_root_page_id(self, page_id: int) -> int:
        for page in self.get_rootline(page_id):
            if page.is_siteroot:
                return page.uid
        return page_id

    def first_domain(self, rootline: Sequence[PageRecord]) -> str:
        with self._lock:
            domains = deepcopy(self._domains)
        for page in rootline:
            bound = sorted(
                (d for d in domains if d.pid == page.uid and not d.hidden and not d.redirect_to),
                key=lambda d: d.sorting,
            )
            if bound:
                return bound[0].domain_name
        return ""
