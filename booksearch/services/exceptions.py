"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class CatalogServiceError(ServiceError):
    """Raised when the catalog endpoint fails or returns an unusable body."""
