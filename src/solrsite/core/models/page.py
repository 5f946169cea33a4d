from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageRecord(BaseModel):
    """A row of the page tree.

    Only the columns the site resolver relies on are declared; any other
    column coming from the store is kept as extra data.
    """

    model_config = ConfigDict(extra="allow")

    uid: int
    pid: int = 0
    title: str = ""
    is_siteroot: bool = False
    deleted: bool = False
    hidden: bool = False
    doktype: int = 1
    sorting: int = 0


class DomainRecord(BaseModel):
    """A domain binding attached to a page (``pid``)."""

    uid: int
    pid: int
    domain_name: str = Field(alias="domainName")
    hidden: bool = False
    sorting: int = 0
    redirect_to: Optional[str] = Field(default=None, alias="redirectTo")

    model_config = ConfigDict(populate_by_name=True)
