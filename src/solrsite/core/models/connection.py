from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


def split_connection_key(connection_key: str) -> Tuple[int, int]:
    """Split a ``"<rootPageId>|<languageId>"`` registry key.

    Raises ValueError when the key does not have exactly two integer parts.
    """
    parts = str(connection_key).split("|")
    if len(parts) != 2:
        raise ValueError(f"Connection key '{connection_key}' does not match 'rootPageId|languageId'.")
    return int(parts[0]), int(parts[1])


class SolrConnection(BaseModel):
    """Connection descriptor stored in the server registry."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    root_page_uid: int = Field(alias="rootPageUid")
    language: int = 0
    label: str = ""
    scheme: str = Field(default="http", alias="solrScheme")
    host: str = Field(default="localhost", alias="solrHost")
    port: int = Field(default=8983, alias="solrPort")
    path: str = Field(default="/solr/", alias="solrPath")
