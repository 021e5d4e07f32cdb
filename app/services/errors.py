class ServiceError(Exception):
    """Base class for errors raised by the store services."""


class InvalidInput(ServiceError):
    """A required field is missing."""


class InvalidVoteType(ServiceError):
    pass


class NotFound(ServiceError):
    pass


class StorageFailure(ServiceError):
    """Writing a document to disk failed."""
