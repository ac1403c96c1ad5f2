"""Standardized exceptions for credential resolution.

This module provides the exception types raised while looking up, parsing,
prompting for and storing credentials.
"""


class TfxAuthError(Exception):
    """Base exception for all credential resolution errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize the error with a message and optional error code.

        Args:
            message: Human-readable error message.
            error_code: Optional error code for programmatic handling.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class UnsupportedAuthTypeError(TfxAuthError):
    """Raised when an auth type discriminator matches no credential variant."""

    def __init__(self, auth_type: str) -> None:
        """Initialize unsupported auth type error.

        Args:
            auth_type: The discriminator that could not be dispatched.
        """
        super().__init__(f"Unsupported auth type: {auth_type}", "UNSUPPORTED_AUTH_TYPE")
        self.auth_type = auth_type


class MalformedCredentialStringError(TfxAuthError):
    """Raised when a serialized credential does not match its variant's layout."""

    def __init__(self, kind: str, reason: str) -> None:
        """Initialize malformed credential error.

        Args:
            kind: The credential kind that was being parsed.
            reason: Why the serialized form was rejected. Never contains secrets.
        """
        super().__init__(
            f"Malformed '{kind}' credential string: {reason}", "MALFORMED_CREDENTIAL"
        )
        self.kind = kind


class PromptFailureError(TfxAuthError):
    """Raised when required input cannot be obtained from the user."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize prompt failure error.

        Args:
            message: Error message describing the prompting failure.
            field: Optional name of the field that could not be collected.
        """
        super().__init__(message, "PROMPT_FAILURE")
        self.field = field


class CredentialStoreError(TfxAuthError):
    """Raised when a credential store backend fails."""

    def __init__(self, message: str, store_type: str | None = None) -> None:
        """Initialize credential store error.

        Args:
            message: Error message describing the store failure.
            store_type: Optional type of store that caused the error.
        """
        super().__init__(message, "CREDENTIAL_STORE_ERROR")
        self.store_type = store_type


class CredentialStateError(TfxAuthError):
    """Raised when a credential is used outside its populated lifecycle."""

    def __init__(self, message: str) -> None:
        """Initialize credential state error."""
        super().__init__(message, "CREDENTIAL_STATE_ERROR")


class UnknownStoreTypeError(ValueError):
    """Raised when an unknown store type is specified."""

    def __init__(self, store_type: str) -> None:
        """Initialize the unknown store type error.

        Args:
            store_type: The unknown store type that was specified.
        """
        super().__init__(f"Unknown store type: {store_type}")
        self.store_type = store_type
