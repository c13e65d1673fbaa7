"""Exception types for link-portal."""


class PortalError(Exception):
    """Base class for link-portal errors."""


class LoadError(PortalError):
    """The portal document could not be fetched or is malformed."""
