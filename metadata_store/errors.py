class MetadataError(Exception):
    """Base class for every error raised by a metadata backend."""


class ValidationError(MetadataError):
    """A required argument was missing. Raised before the store is touched."""


class NotFoundError(MetadataError):
    """The requested upload does not exist."""


class StoreError(MetadataError):
    """The database reported a failure. The original error is kept as __cause__."""
