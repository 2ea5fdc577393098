"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; main.py turns them into
{"success": false, "error": <code>, "message": <text>} with the status below.
"""

from typing import Optional


class CatalogError(Exception):
    status_code = 500
    code = "internal_error"
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(CatalogError):
    status_code = 400
    code = "missing_field"
    default_message = "Required field is missing"


class WeakPassword(CatalogError):
    status_code = 400
    code = "weak_password"
    default_message = "New password is too short"


class MalformedRequest(CatalogError):
    status_code = 400
    code = "malformed_request"
    default_message = "Request body could not be parsed"


class InvalidCredentials(CatalogError):
    status_code = 401
    code = "invalid_credentials"
    default_message = "Invalid username or password"


class Unauthenticated(CatalogError):
    status_code = 401
    code = "unauthenticated"
    default_message = "Unauthorized"


class NotFound(CatalogError):
    status_code = 404
    code = "not_found"
    default_message = "File not found"


class StorageFailure(CatalogError):
    status_code = 500
    code = "storage_failure"
    default_message = "Storage operation failed"
