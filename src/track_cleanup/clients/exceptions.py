"""Exceptions shared by the metadata service clients."""


class MetadataServiceError(Exception):
    """Base class for any failed call to an external metadata service.

    The language resolver catches this type, records the failure and moves
    on to the next source.
    """


class MetadataResponseError(MetadataServiceError):
    """Raised when a service returns a payload that cannot be interpreted."""
