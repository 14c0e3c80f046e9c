"""Custom exceptions for the blocklist service."""


class BlocklistError(Exception):
    """Base exception for business and storage errors."""

    pass


class DomainValidationError(BlocklistError):
    """Raised when a request is rejected before the store is touched (e.g. empty batch, missing parameter)."""

    pass


class InvalidPayloadError(DomainValidationError):
    """Raised when a request body can't be decoded as a JSON array of strings."""

    pass


class UnsupportedMediaTypeError(BlocklistError):
    """Raised when a request body is sent with a content type other than application/json."""

    pass


class FatalStorageError(BlocklistError):
    """Raised when the store fails in a way that is not a per-item outcome. Aborts the whole request."""

    pass


class StorageUnavailableError(FatalStorageError):
    """Raised when a connection or transaction can't be acquired from the store."""

    pass
