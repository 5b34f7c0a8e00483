"""
Error taxonomy for the mensa menu service.

Only ValidationError reaches HTTP clients (as a 400). The other errors are
raised by collaborators and converted to fallbacks at the orchestrator and
cache-store boundaries.
"""


class MenuError(Exception):
    """Base class for all application errors."""


class ValidationError(MenuError):
    """Malformed request. The caller's fault, reported immediately."""


class FetchError(MenuError):
    """The menu source page could not be fetched or parsed."""


class ServiceError(MenuError):
    """The generative backend failed, timed out, or returned nothing usable."""


class CacheIOError(MenuError):
    """A cache store could not read or write a partition."""
