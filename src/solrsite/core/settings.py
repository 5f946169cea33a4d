# Logging adapter for application-wide logging
from solrsite.adapters.logging_adapter import LoggingAdapter

from pathlib import Path
from typing import Optional

from pydantic import FilePath, SecretStr, field_validator
from pydantic_settings import BaseSettings
from rich import print

from solrsite.core.interfaces.logging import LoggingPort

# using pydantic_settings to manage environment variables
# and do automatic type casting in a central place
class SolrSiteSettings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore"
    }
    SOLRSITE_LOG_LEVEL: str = "INFO"
    # installation wide secret mixed into every site hash
    SOLRSITE_ENCRYPTION_KEY: SecretStr = SecretStr("")
    SOLRSITE_SITE_HASH_NAMESPACE: str = "tx_solr"
    SOLRSITE_REGISTRY_NAMESPACE: str = "tx_solr"
    SOLRSITE_REGISTRY_SERVERS_KEY: str = "servers"
    SOLRSITE_PAGES_MAX_DEPTH: int = 999
    # SQLAlchemy URL of the page tree database, e.g. sqlite:///cms.db
    SOLRSITE_DATABASE_URL: Optional[str] = None
    SOLRSITE_DB_RETRY_ATTEMPTS: int = 3
    # YAML sources used when no database is configured
    SOLRSITE_CONTENT_FILE: Optional[FilePath] = None
    SOLRSITE_REGISTRY_FILE: Optional[Path] = None
    SOLRSITE_CONFIGURATION_FILE: Optional[FilePath] = None

    def print_settings(self, logger: LoggingPort):
        """Prints the settings for debugging purposes"""
        logger.info("solrsite settings:")
        print(self)

    @field_validator("SOLRSITE_PAGES_MAX_DEPTH")
    @classmethod
    def ensure_non_negative_depth(cls, value: int) -> int:
        if value < 0:
            raise ValueError("SOLRSITE_PAGES_MAX_DEPTH must not be negative")
        return value


app_settings = SolrSiteSettings()

logger: LoggingPort = LoggingAdapter("solrsite", app_settings.SOLRSITE_LOG_LEVEL)


def set_logger(new_logger: LoggingPort) -> None:
    """Replace the module-level logger used by core code."""
    global logger
    logger = new_logger


def get_logger() -> LoggingPort:
    return logger
