# api/errors.py
"""Error handling for the API.

Validation, authorization and lookup failures are answered directly by
exception handlers with ``{"message": ...}``. Everything else reaches
ErrorMiddleware, the last-resort boundary.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from core.errors import AuthenticationError, ForbiddenError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _describe_invalid_request(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        # drop the "body"/"query"/"path" prefix
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(problems) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register the handlers for errors answered with a plain message.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(_request: Request, exc: ValidationError) -> JSONResponse:
        return _message_response(exc.status_code, exc.message)

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(_request: Request, exc: ForbiddenError) -> JSONResponse:
        return _message_response(exc.status_code, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return _message_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_request(_request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_invalid_request(exc)
        logger.warning("Rejected invalid request: %s", message)
        return _message_response(400, message)


def translate_error(error: Exception) -> JSONResponse:
    """Turn an error nothing else handled into a response."""
    if isinstance(error, AuthenticationError):
        logger.warning("Authentication failed: %s", error.code)
        return JSONResponse(
            status_code=error.status_code,
            content={"code": error.code, "message": error.message},
        )

    logger.error("Unexpected error: %s", type(error).__name__, exc_info=error)
    return JSONResponse(
        status_code=500,
        content={
            "message": str(error),
            "stack": "".join(traceback.format_exception(error)),
        },
    )


class ErrorMiddleware:
    """ASGI middleware translating uncaught errors into JSON responses.

    If the response has already started, the error is re-raised unchanged
    to the server since a second response cannot be sent.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            response = translate_error(exc)
            await response(scope, receive, send)
