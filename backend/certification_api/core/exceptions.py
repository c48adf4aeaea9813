"""Error taxonomy shared by the services and the HTTP layer."""


class CertificationAPIError(Exception):
    """Base class for errors raised by this service."""


class ValidationError(CertificationAPIError):
    """A required request field is missing. The message is shown to the client."""


class UpstreamError(CertificationAPIError):
    """The completion provider is unreachable, failed, or answered malformed data."""


class StorageError(CertificationAPIError):
    """A database operation failed."""
