# inventory_service/exceptions.py

"""
Errors raised by the product service and rendered as `{"error": ...}` responses.
"""
from typing import Dict, Union

from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: Union[str, Dict[str, str]]):
        super().__init__(detail)
        self.detail = detail


class BadRequestError(ServiceError):
    """Malformed id or failed field validation (detail is then a field -> message map)."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "unauthorized"):
        super().__init__(detail)


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, detail: str = "not found"):
        super().__init__(detail)


class InternalError(ServiceError):
    """Store or unexpected failure; the detail never carries store internals."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
