"""
Errors raised by the CRM app.

Every error carries the plain message that is shown to the GraphQL client.
"""


class CRMError(Exception):
    """Base exception for CRM errors."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class DocumentNotFound(CRMError):
    """Raised when a lookup by id or selector matches nothing."""


class DocumentValidationError(CRMError):
    """Raised when a write would break a field rule or a reference."""


class LoginRequired(CRMError):
    def __init__(self, message="Login required"):
        super().__init__(message)


class PermissionRequired(CRMError):
    def __init__(self, message="Permission required"):
        super().__init__(message)


class EngagesAPIError(CRMError):
    """Raised when a call to the engagement service fails."""

    def __init__(self, path, reason):
        super().__init__(f"Engages API request to {path} failed: {reason}")
        self.path = path
        self.reason = reason
