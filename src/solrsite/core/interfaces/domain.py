from abc import ABC, abstractmethod
from typing import Sequence

from solrsite.core.models.page import PageRecord


class DomainResolverPort(ABC):
    @abstractmethod
    def first_domain(self, rootline: Sequence[PageRecord]) -> str:
        """Return the first domain bound to a page of the rootline, walking
        from the first entry outward, or an empty string."""
        pass
