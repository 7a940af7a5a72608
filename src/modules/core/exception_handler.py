"""Central exception-to-response mapping for the REST API.

Installed as DRF's ``EXCEPTION_HANDLER``.  ``ERROR_MAPPINGS`` is an
ordered table of ``(exception class, status, body builder)``; the first
row whose class matches wins.  The table is total: framework request
errors keep DRF's status, and anything else falls through to a generic
500 that exposes only the exception message.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple, Type

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from modules.products.exceptions import (
    EmptyProductPage,
    InvalidPageNumber,
    NoProductsFound,
    ProductAlreadyExists,
    ProductNotFound,
)

logger = structlog.get_logger(__name__)

BodyBuilder = Callable[[BaseException, int], Dict[str, Any]]

DATABASE_ERROR_MESSAGE = "database access error"
UNEXPECTED_ERROR_PREFIX = "unexpected error: "


def most_specific_cause(exc: BaseException) -> BaseException:
    """Return the innermost exception of the ``__cause__`` chain."""
    cause = exc
    while cause.__cause__ is not None:
        cause = cause.__cause__
    return cause


def message_body(exc: BaseException, status_code: int) -> Dict[str, Any]:
    return {"message": str(exc)}


def error_body(exc: BaseException, status_code: int) -> Dict[str, Any]:
    return {"error": str(exc), "status": status_code}


def data_access_body(exc: BaseException, status_code: int) -> Dict[str, Any]:
    return {
        "message": DATABASE_ERROR_MESSAGE,
        "error": f"{exc}: {most_specific_cause(exc)}",
    }


def unexpected_body(exc: BaseException, status_code: int) -> Dict[str, Any]:
    return {"error": f"{UNEXPECTED_ERROR_PREFIX}{exc}", "status": status_code}


ERROR_MAPPINGS: Tuple[Tuple[Type[BaseException], int, BodyBuilder], ...] = (
    (EmptyProductPage, status.HTTP_404_NOT_FOUND, message_body),
    (InvalidPageNumber, status.HTTP_400_BAD_REQUEST, message_body),
    (NoProductsFound, status.HTTP_204_NO_CONTENT, message_body),
    (ProductNotFound, status.HTTP_404_NOT_FOUND, error_body),
    (ProductAlreadyExists, status.HTTP_400_BAD_REQUEST, error_body),
    (DatabaseError, status.HTTP_500_INTERNAL_SERVER_ERROR, data_access_body),
)


def resolve(exc: BaseException) -> Tuple[int, BodyBuilder]:
    """Find the status and body builder for ``exc`` (catch-all: 500)."""
    for exc_class, status_code, builder in ERROR_MAPPINGS:
        if isinstance(exc, exc_class):
            return status_code, builder
    return status.HTTP_500_INTERNAL_SERVER_ERROR, unexpected_body


def _framework_response(exc: Exception, context: Dict[str, Any]) -> Response | None:
    """Let DRF answer its own request errors (parse, method, media type)."""
    response = drf_exception_handler(exc, context)
    if response is None:
        return None
    detail = response.data
    if isinstance(detail, dict) and "detail" in detail:
        detail = detail["detail"]
    response.data = {"error": str(detail), "status": response.status_code}
    return response


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF exception handler applying ``ERROR_MAPPINGS``."""
    view = context.get("view")
    log = logger.bind(
        exception=type(exc).__name__,
        view=type(view).__name__ if view is not None else None,
    )

    status_code, builder = resolve(exc)
    if builder is unexpected_body:
        response = _framework_response(exc, context)
        if response is not None:
            log.warning("api.request_error", status_code=response.status_code)
            return response

    set_rollback()
    body = builder(exc, status_code)

    if status_code >= 500:
        log.exception("api.server_error", status_code=status_code)
    elif status_code >= 400:
        log.warning("api.client_error", status_code=status_code, detail=str(exc))
    else:
        log.info("api.empty_result", status_code=status_code, detail=str(exc))

    return Response(body, status=status_code)
