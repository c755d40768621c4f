"""Typed errors raised by the core services.

Each error carries the HTTP status code the API layer renders it with, so
services stay free of transport concerns.
"""


class JobNestError(Exception):
    """Base class for business-rule rejections."""

    status_code: int = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(JobNestError):
    """Referenced entity does not exist."""

    status_code = 404


class ForbiddenError(JobNestError):
    """Caller is authenticated but does not own the entity."""

    status_code = 403


class ConflictError(JobNestError):
    """Uniqueness invariant violated."""

    status_code = 400


class ValidationError(JobNestError):
    """Malformed or out-of-range field."""

    status_code = 400
