from typing import List

from pydantic import BaseModel


class SiteOption(BaseModel):
    value: int
    label: str
    selected: bool = False


class SiteSelector(BaseModel):
    """Selection data for a site dropdown; rendering is up to the caller."""

    name: str
    options: List[SiteOption]

    @property
    def selected(self) -> SiteOption | None:
        for option in self.options:
            if option.selected:
                return option
        return None
