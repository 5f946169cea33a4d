"""SQLAlchemy-backed PageRepositoryPort and DomainResolverPort.

Reads the ``pages`` and ``sys_domain`` tables with SQLAlchemy Core. The
additional where clause from the search configuration is applied verbatim
as SQL text, so it must come from trusted configuration only.
"""
from __future__ import annotations

import re
from typing import List, Optional, Sequence

from sqlalchemy import (
    Boolean,
    Column,
    Engine,
    Integer,
    MetaData,
    String,
    Table,
    and_,
    create_engine,
    select,
    text,
)
from sqlalchemy.exc import OperationalError

from solrsite.adapters.retry_tenacity import TenacityRetryAdapter
from solrsite.core.interfaces.domain import DomainResolverPort
from solrsite.core.interfaces.page_repository import PageRepositoryPort
from solrsite.core.interfaces.retry import RetryPort
from solrsite.core.models.page import PageRecord
from solrsite.core.settings import get_logger

metadata = MetaData()

pages_table = Table(
    "pages",
    metadata,
    Column("uid", Integer, primary_key=True),
    Column("pid", Integer, nullable=False, default=0, index=True),
    Column("title", String(255), nullable=False, default=""),
    Column("is_siteroot", Boolean, nullable=False, default=False),
    Column("deleted", Boolean, nullable=False, default=False),
    Column("hidden", Boolean, nullable=False, default=False),
    Column("doktype", Integer, nullable=False, default=1),
    Column("sorting", Integer, nullable=False, default=0),
)

domains_table = Table(
    "sys_domain",
    metadata,
    Column("uid", Integer, primary_key=True),
    Column("pid", Integer, nullable=False, index=True),
    Column("domainName", String(255), nullable=False, default=""),
    Column("redirectTo", String(255), nullable=False, default=""),
    Column("hidden", Boolean, nullable=False, default=False),
    Column("sorting", Integer, nullable=False, default=0),
)

_LEADING_AND = re.compile(r"^\s*AND\s+", re.IGNORECASE)

# guards against cycles in corrupt trees
MAX_ROOTLINE_LENGTH = 99


def create_schema(engine: Engine) -> None:
    """Create the tables this adapter reads (used for tests and local setups)."""
    metadata.create_all(engine)


class SqlAlchemyPageRepository(PageRepositoryPort, DomainResolverPort):
    def __init__(self, engine: Engine | str, retry: RetryPort | None = None) -> None:
        self._engine = create_engine(engine) if isinstance(engine, str) else engine
        self._retry = retry or TenacityRetryAdapter(
            attempts=3, wait_initial=0.1, wait_max=1.0, exception_types=(OperationalError,)
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def _fetch_page(self, uid: int) -> Optional[PageRecord]:
        with self._engine.connect() as conn:
            row = conn.execute(select(pages_table).where(pages_table.c.uid == uid)).mappings().first()
        return PageRecord.model_validate(dict(row)) if row else None

    def get_record(self, uid: int) -> Optional[PageRecord]:
        return self._retry.execute(self._fetch_page, uid)

    def get_rootline(self, uid: int) -> List[PageRecord]:
        rootline: List[PageRecord] = []
        current = self.get_record(uid)
        while current is not None and not current.deleted:
            if len(rootline) >= MAX_ROOTLINE_LENGTH:
                get_logger().warning("Rootline of page %s exceeds %d levels; truncating", uid, MAX_ROOTLINE_LENGTH)
                break
            rootline.append(current)
            if current.pid == 0:
                break
            current = self.get_record(current.pid)
        return rootline

    def _fetch_children(self, parent_uid: int, additional_where_clause: str) -> List[int]:
        query = (
            select(pages_table.c.uid)
            .where(and_(pages_table.c.pid == parent_uid, pages_table.c.deleted.is_(False)))
            .order_by(pages_table.c.sorting, pages_table.c.uid)
        )
        clause = _LEADING_AND.sub("", additional_where_clause or "").strip()
        if clause:
            query = query.where(text(clause))
        with self._engine.connect() as conn:
            return [int(uid) for uid in conn.execute(query).scalars()]

    def get_child_page_ids(self, parent_uid: int, additional_where_clause: str = "") -> List[int]:
        return self._retry.execute(self._fetch_children, parent_uid, additional_where_clause)

    def get_root_page_id(self, page_id: int) -> int:
        for page in self.get_rootline(page_id):
            if page.is_siteroot:
                return page.uid
        return page_id

    def _fetch_domain(self, page_uid: int) -> Optional[str]:
        query = (
            select(domains_table.c.domainName)
            .where(
                and_(
                    domains_table.c.pid == page_uid,
                    domains_table.c.hidden.is_(False),
                    domains_table.c.redirectTo == "",
                )
            )
            .order_by(domains_table.c.sorting, domains_table.c.uid)
            .limit(1)
        )
        with self._engine.connect() as conn:
            return conn.execute(query).scalar()

    def first_domain(self, rootline: Sequence[PageRecord]) -> str:
        for page in rootline:
            domain = self._retry.execute(self._fetch_domain, page.uid)
            if domain:
                return domain
        return ""
