import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.fields import get_error_detail
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"


def flatten_errors(detail, prefix: str = "") -> list[dict]:
    """Turn nested DRF error details into a flat list of ``{field, message}`` pairs."""
    errors: list[dict] = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            errors.extend(flatten_errors(value, field))
    elif isinstance(detail, list):
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                field = f"{prefix}.{index}" if prefix else str(index)
                errors.extend(flatten_errors(value, field))
            else:
                errors.append({"field": prefix or "non_field_errors", "message": str(value)})
    else:
        errors.append({"field": prefix or "non_field_errors", "message": str(detail)})
    return errors


def envelope_exception_handler(exc, context):
    """
    Render every API error as ``{success: false, error, errors?}``.

    Database integrity errors surface as 409 and model validation errors as 400;
    anything DRF does not know about becomes a logged 500.
    """
    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error while handling request: %s", exc)
        exc = Conflict()
    elif isinstance(exc, DjangoValidationError):
        exc = ValidationError(get_error_detail(exc))

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled API error in %s",
            view.__class__.__name__ if view else "unknown view",
            exc_info=exc,
        )
        return Response(
            {"success": False, "error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {
            "success": False,
            "error": "Validation failed",
            "errors": flatten_errors(response.data),
        }
        return response

    detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
    response.data = {"success": False, "error": str(detail)}
    return response
