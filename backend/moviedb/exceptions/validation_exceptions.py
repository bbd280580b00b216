from fastapi import status

from .base import AppError


class PayloadError(AppError):
    """Base class for rejected request payloads, reported under "error"."""

    status_code = status.HTTP_400_BAD_REQUEST
    body_key = "error"


class MissingFieldsError(PayloadError):
    def __init__(self, fields: list[str]):
        self.fields = fields
        detail = "".join(f"{field} required " for field in fields)
        super().__init__(detail)


class InvalidFieldsError(PayloadError):
    def __init__(self, fields: list[str]):
        self.fields = fields
        detail = "".join(f"{field} invalid " for field in fields)
        super().__init__(detail)
