"""Custom exceptions for policy operations."""


class PolicyError(Exception):
    """Base class for policy-related errors."""

    pass


class PolicyValidationError(PolicyError):
    """Error during cleanup settings validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class UnknownLanguageError(PolicyError):
    """Raised when a native language code has no ISO 639-2 mapping.

    Callers must skip the file rather than fall back to a guessed
    language.
    """

    def __init__(self, code: str | None) -> None:
        self.code = code
        super().__init__(f"No ISO 639-2 mapping for language code '{code}'")
