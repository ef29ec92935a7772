"""Standardised API error responses.

Registered as DRF's ``EXCEPTION_HANDLER``.  Every error leaves the API as::

    {
        "type": "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "field" | null}],
        "context": {...}
    }

``context`` carries the structured values of domain errors (e.g.
``{"available": 2, "requested": 3}``) so clients never parse messages.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ErrorDetail
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import DomainError, InfrastructureError

logger = structlog.get_logger(__name__)

_ROOT_KEYS = {"detail", "non_field_errors", "__all__"}


def standardized_exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    if isinstance(exc, DomainError):
        logger.info("api.domain_error", code=exc.code, detail=exc.detail)
        return _build(
            exc.status_code,
            [{"code": exc.code, "detail": exc.detail, "attr": None}],
            exc.context,
        )

    if isinstance(exc, InfrastructureError):
        logger.error("api.infrastructure_error", detail=str(exc))
        return _build(
            exc.status_code,
            [{"code": exc.code, "detail": str(exc), "attr": None}],
        )

    if isinstance(exc, PydanticValidationError):
        errors = [
            {
                "code": "invalid",
                "detail": error["msg"],
                "attr": ".".join(str(part) for part in error["loc"]) or None,
            }
            for error in exc.errors()
        ]
        return _build(status.HTTP_400_BAD_REQUEST, errors)

    if isinstance(exc, DjangoValidationError):
        detail = exc.message_dict if hasattr(exc, "error_dict") else exc.messages
        return _build(status.HTTP_400_BAD_REQUEST, list(_flatten(detail)))

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    detail = exc.detail if isinstance(exc, APIException) else response.data
    response.data = _payload(response.status_code, list(_flatten(detail)))
    return response


def _build(
    status_code: int, errors: list[dict[str, Any]], extra: Optional[dict] = None
) -> Response:
    return Response(_payload(status_code, errors, extra), status=status_code)


def _payload(
    status_code: int, errors: list[dict[str, Any]], extra: Optional[dict] = None
) -> dict[str, Any]:
    return {
        "type": "server_error" if status_code >= 500 else "client_error",
        "errors": errors,
        "context": extra or {},
    }


def _flatten(data: Any, attr: Optional[str] = None) -> Iterator[dict[str, Any]]:
    if isinstance(data, dict):
        for key, value in data.items():
            if key in _ROOT_KEYS:
                child = attr
            else:
                child = str(key) if attr is None else f"{attr}.{key}"
            yield from _flatten(value, child)
    elif isinstance(data, (list, tuple)):
        for item in data:
            yield from _flatten(item, attr)
    else:
        code = data.code if isinstance(data, ErrorDetail) else "invalid"
        yield {"code": code, "detail": str(data), "attr": attr}
