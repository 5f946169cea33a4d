import logging
from solrsite.core.interfaces.logging import LoggingPort


class LoggingAdapter(LoggingPort):
    """Concrete logging adapter.

    Delegates to Python's logging. It intentionally does NOT add its own
    handlers so that central `configure_logging` controls sinks. The site
    root id is injected by root handlers via filter; we simply emit.
    """

    def __init__(self, name: str = "solrsite", log_level: int | str = logging.INFO):
        self.logger = logging.getLogger(name)
        # Normalize level string -> numeric
        if isinstance(log_level, str):
            log_level = logging.getLevelNamesMapping().get(log_level.upper().strip(), logging.INFO)
        self.logger.setLevel(log_level)
        # Allow messages to bubble to root handlers (separate sinks)
        self.logger.propagate = True
        self.logger.debug("Initialized logger name=%s level=%s", name, self.logger.level)

    def info(self, msg: str, *args):
        self.logger.info(msg, *args)

    def warning(self, msg: str, *args):
        self.logger.warning(msg, *args)

    def error(self, msg: str, *args):
        self.logger.error(msg, *args)

    def debug(self, msg: str, *args):
        self.logger.debug(msg, *args)
