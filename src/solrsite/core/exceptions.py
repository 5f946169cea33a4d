from typing import Optional


class SiteError(Exception):
    """Base exception for site resolution failures.

    Attributes:
        message: Human-readable error description
        diagnostic: Technical diagnostic information for debugging
    """
    def __init__(self, message: str, diagnostic: Optional[str] = None):
        self.message = message
        self.diagnostic = diagnostic
        super().__init__(message)


class InvalidConfigurationError(SiteError):
    """Raised when a page used as site root is not flagged as root page.

    Attributes:
        root_page_id: The offending page id
        code: Stable numeric error code for log correlation
    """
    code = 1309272922

    def __init__(self, root_page_id: int, diagnostic: Optional[str] = None):
        self.root_page_id = root_page_id
        message = (
            f"The page for the given page ID '{root_page_id}' is not marked as root page "
            "and can therefore not be used as site root page."
        )
        super().__init__(message=message, diagnostic=diagnostic)


class RegistryError(SiteError):
    """Raised when the server registry source cannot be read or validated."""
    def __init__(self, source: str, diagnostic: Optional[str] = None):
        self.source = source
        super().__init__(message=f"Failed to load registry from {source}", diagnostic=diagnostic)
