"""Custom exception hierarchy for iptv-manager."""


class IptvManagerError(Exception):
    """Base exception for all iptv-manager errors."""


class CustomerNotFoundError(IptvManagerError):
    """Raised when no customer matches the given internal id."""


class DuplicateCustomerError(IptvManagerError):
    """Raised when adding a customer whose internal id is already stored."""


class ValidationError(IptvManagerError):
    """Raised when editor input cannot be accepted."""


class InvalidFieldError(ValidationError):
    """Raised when a single field value cannot be parsed."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid value for {field!r}: {value!r} ({reason})")
        self.field = field
        self.value = value
        self.reason = reason


class MissingFieldsError(ValidationError):
    """Raised when required fields are empty on submission."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Required fields missing: {', '.join(fields)}")
        self.fields = fields


class ConfigurationError(IptvManagerError):
    """Raised when configuration is invalid or missing."""


class StorageError(IptvManagerError):
    """Raised when stored data cannot be read or written."""
