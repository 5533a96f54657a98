"""Custom exceptions for the application."""


class FpdbException(Exception):
    """Base exception for the Flashpoint Search API."""


class ConfigurationError(FpdbException):
    """Invalid or incomplete server configuration."""


class FieldRegistryError(ConfigurationError):
    """The field registry configuration cannot be used."""

    def __init__(self, message: str, field_name: str | None = None):
        self.field_name = field_name
        self.message = f"field '{field_name}': {message}" if field_name else message
        super().__init__(self.message)


class QueryExecutionError(FpdbException):
    """The database rejected or failed a compiled statement."""


class RowDecodeError(FpdbException):
    """A result row could not be decoded."""

    def __init__(self, field_name: str, raw_value: object, reason: str):
        self.field_name = field_name
        self.raw_value = raw_value
        self.message = f"cannot decode field '{field_name}' ({raw_value!r}): {reason}"
        super().__init__(self.message)
