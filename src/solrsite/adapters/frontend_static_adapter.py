from solrsite.core.interfaces.configuration import ConfigurationPort
from solrsite.core.interfaces.frontend import FrontendPort
from solrsite.core.models.frontend import FrontendContext
from solrsite.core.settings import get_logger


class StaticFrontendAdapter(FrontendPort):
    """Builds the frontend context from the site's ``config`` section."""

    def __init__(self, configuration: ConfigurationPort) -> None:
        self._configuration = configuration
        self.initializations = 0

    def initialize(self, root_page_id: int) -> FrontendContext:
        self.initializations += 1
        config = self._configuration.get_configuration_from_page_id(root_page_id, "config")
        mode = config.get_value_by_path_or_default("sys_language_mode", "")
        get_logger().debug("Initialized frontend for root page %s (sys_language_mode=%r)", root_page_id, mode)
        return FrontendContext(root_page_id=root_page_id, sys_language_mode=str(mode))
