"""
Typed service errors. Each carries the HTTP status the API layer maps it to.
"""


class PackageEngineError(Exception):
    """Base class for errors raised by the package services"""
    status_code = 400
    category = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundOrForbidden(PackageEngineError):
    """Entity missing or owned by someone else, reported the same way."""
    status_code = 404
    category = "not_found"


class ValidationError(PackageEngineError):
    status_code = 400
    category = "validation_error"


class ConfigurationError(PackageEngineError):
    """The caterer has not configured a prerequisite (e.g. minimum guests)."""
    status_code = 400
    category = "configuration_error"


class ConflictError(PackageEngineError):
    status_code = 409
    category = "conflict"


class InvalidCaterer(PackageEngineError):
    status_code = 403
    category = "invalid_caterer"

    def __init__(self, message: str = "Invalid caterer"):
        super().__init__(message)
