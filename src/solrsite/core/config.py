"""Configuration models for core domain components.

Pydantic-based configuration classes consolidate the settings the site
manager needs, enabling dependency injection and testability.
"""

from pydantic import BaseModel, Field, SecretStr


class SiteManagerConfig(BaseModel):
    """Configuration for SiteManager behavior.

    Attributes:
        encryption_key: Installation secret mixed into site hashes
        site_hash_namespace: Fixed string appended to every site hash input
        registry_namespace: Registry namespace holding the server map
        registry_servers_key: Registry key of the server map
        default_max_depth: Depth limit used by ``Site.get_pages`` when none is given
    """

    encryption_key: SecretStr = Field(
        default=SecretStr(""),
        description="Secret material mixed into site hashes"
    )

    site_hash_namespace: str = Field(
        default="tx_solr",
        description="Namespace string appended to the site hash input"
    )

    registry_namespace: str = Field(
        default="tx_solr",
        description="Registry namespace of the configured search connections"
    )

    registry_servers_key: str = Field(
        default="servers",
        description="Registry key of the configured search connections"
    )

    default_max_depth: int = Field(
        default=999,
        ge=0,
        description="Maximum depth to descend into the page tree when collecting site pages"
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @classmethod
    def from_app_settings(cls, settings) -> "SiteManagerConfig":
        """Factory method to construct config from SolrSiteSettings instance.

        Args:
            settings: SolrSiteSettings instance from core.settings

        Returns:
            SiteManagerConfig with values from app settings
        """
        return cls(
            encryption_key=settings.SOLRSITE_ENCRYPTION_KEY,
            site_hash_namespace=settings.SOLRSITE_SITE_HASH_NAMESPACE,
            registry_namespace=settings.SOLRSITE_REGISTRY_NAMESPACE,
            registry_servers_key=settings.SOLRSITE_REGISTRY_SERVERS_KEY,
            default_max_depth=settings.SOLRSITE_PAGES_MAX_DEPTH,
        )
