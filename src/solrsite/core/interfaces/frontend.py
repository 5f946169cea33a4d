from abc import ABC, abstractmethod

from solrsite.core.models.frontend import FrontendContext


class FrontendPort(ABC):
    @abstractmethod
    def initialize(self, root_page_id: int) -> FrontendContext:
        """Bootstrap the frontend context for a site root and return it."""
        pass
