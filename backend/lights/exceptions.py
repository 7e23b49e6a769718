"""Translate core and framework errors into JSON responses."""

from __future__ import annotations

import logging
from typing import Any

from django.http import JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from lumen import InvalidArgumentError, NotFoundError

from .throttling import THROTTLE_MESSAGE

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong!"


def _first_message(detail: Any) -> str:
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ("non_field_errors", "detail"):
                return message
            return f"{field}: {message}"
        return "Invalid input"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid input"
    return str(detail)


def light_exception_handler(exc: Exception, context: dict) -> Response:
    """DRF exception handler producing ``{"error": ...}`` bodies.

    Core ``NotFoundError`` becomes 404 and ``InvalidArgumentError`` 400.
    Anything DRF does not recognise is logged and answered with a 500.
    """

    if isinstance(exc, NotFoundError):
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, InvalidArgumentError):
        return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, exceptions.Throttled):
        response = Response(
            {"message": THROTTLE_MESSAGE}, status=status.HTTP_429_TOO_MANY_REQUESTS
        )
        if exc.wait is not None:
            response["Retry-After"] = "%d" % exc.wait
        return response

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s", type(view).__name__ if view else "view", exc_info=exc
        )
        return Response(
            {"error": SERVER_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.data = {"error": "Unauthorized"}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {"error": _first_message(exc.detail), "details": exc.detail}
    else:
        response.data = {"error": _first_message(response.data)}
    return response


def endpoint_not_found(request, exception=None) -> JsonResponse:
    return JsonResponse({"error": "Endpoint not found"}, status=404)


def server_error(request) -> JsonResponse:
    return JsonResponse({"error": SERVER_ERROR_MESSAGE}, status=500)


__all__ = ["endpoint_not_found", "light_exception_handler", "server_error"]
