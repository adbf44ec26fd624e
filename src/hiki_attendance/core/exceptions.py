class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when console credentials cannot be accepted."""


class CredentialDecodeError(AuthenticationError):
    """Raised when a Basic credential token is not valid base64/UTF-8."""
