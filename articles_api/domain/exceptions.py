"""Domain-specific exceptions — framework-independent.

Every error carries the HTTP status it maps to, so the presentation layer
dispatches on ``status_code`` instead of inspecting concrete types.
"""


class ArticlesError(Exception):
    """Base class for all errors raised by the articles service."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ArticlesError):
    """Raised when a command is missing a required field."""

    status_code = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class BindingError(ArticlesError):
    """Raised when a request body or query string cannot be bound."""

    status_code = 400


class StoreError(ArticlesError):
    """Raised when the underlying store fails.

    The message is meant for clients and stays generic; the original
    driver error is kept as ``__cause__`` for logging.
    """

    status_code = 500

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Failed to {operation}")
