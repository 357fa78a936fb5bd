"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class SearchProviderError(ProviderError):
    """Indexed search service failed or returned a malformed response."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class CacheProviderError(ProviderError):
    """Cache backend failed."""

    pass
