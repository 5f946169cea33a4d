"""PageRepositoryPort: hexagonal port for reading the page tree.

Adapters decide where pages live (memory, SQL database). The core only
relies on these four read operations.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from solrsite.core.models.page import PageRecord


class PageRepositoryPort(ABC):
    """Port abstraction for page record lookups and tree traversal."""

    @abstractmethod
    def get_record(self, uid: int) -> Optional[PageRecord]:
        """Return the page record or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_rootline(self, uid: int) -> List[PageRecord]:
        """Return the page followed by its ancestors, topmost page last.

        Deleted pages end the walk. Unknown uids yield an empty list.
        """
        raise NotImplementedError

    @abstractmethod
    def get_child_page_ids(self, parent_uid: int, additional_where_clause: str = "") -> List[int]:
        """Return uids of direct, non-deleted children of a page.

        ``additional_where_clause`` is an extra SQL-style condition further
        restricting the children (e.g. ``"AND doktype <> 254"``).
        """
        raise NotImplementedError

    @abstractmethod
    def get_root_page_id(self, page_id: int) -> int:
        """Return the uid of the closest site root in the page's rootline.

        Falls back to ``page_id`` itself when no page in the rootline is
        flagged as site root.
        """
        raise NotImplementedError
