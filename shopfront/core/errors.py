"""Application error taxonomy.

Every failure a service can report is one of these classes. The HTTP layer
maps them to a JSON body of the form ``{"error": message}`` with the class's
status code (see ``shopfront.api.exception_handlers``).
"""


class ShopfrontError(Exception):
    """Base class for all errors reported to API clients"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ShopfrontError):
    """Missing or malformed input"""

    status_code = 400


class AuthError(ShopfrontError):
    """Missing, malformed, invalid or expired credentials"""

    status_code = 401


class ForbiddenError(ShopfrontError):
    """Authenticated, but the role is not sufficient"""

    status_code = 403


class NotFoundError(ShopfrontError):
    status_code = 404


class ConflictError(ShopfrontError):
    """A unique key (email, language code) is already taken"""

    status_code = 409


class StoreError(ShopfrontError):
    """The relational store or the blob store failed"""

    status_code = 500


class ConfigurationError(StoreError):
    """A required setting (signing key, bucket) is missing"""
