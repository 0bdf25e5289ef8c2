# core/errors.py
"""Error taxonomy shared by the services and the HTTP layer.

Each error carries the HTTP status it is answered with. Anything that is
not a BookshelfError is treated as unknown and answered with a 500.
"""


class BookshelfError(Exception):
    """Base class for all expected bookshelf errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BookshelfError):
    """Missing or invalid input."""

    status_code = 400


class AuthenticationError(BookshelfError):
    """Missing or invalid credentials.

    Attributes:
        code: Machine readable reason, e.g. ``credentials_required``
    """

    status_code = 401

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class ForbiddenError(BookshelfError):
    """The authenticated user may not access the resource."""

    status_code = 403


class NotFoundError(BookshelfError):
    """No resource exists with the requested id."""

    status_code = 404
