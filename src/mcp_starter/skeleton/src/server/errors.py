"""Errors raised by the server's tools."""


class ToolValidationError(ValueError):
    """Raised when a tool receives invalid arguments."""
