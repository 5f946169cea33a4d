from abc import ABC, abstractmethod

from solrsite.core.models.configuration import TypoScriptConfiguration


class ConfigurationPort(ABC):
    @abstractmethod
    def get_configuration_from_page_id(self, page_id: int, path: str = "") -> TypoScriptConfiguration:
        """Return the configuration effective for a page.

        When ``path`` is given only the sub-tree below that dotted path is
        returned (e.g. ``"config"``).
        """
        pass
