# ============================================================================
# FILE: openmusic/core/exceptions.py
# Client-facing error kinds and the centralized response mapper
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)

class ClientError(Exception):
    """Base class for errors caused by the client (mapped to 4xx)"""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

class ValidationError(ClientError):
    """Malformed payload"""

    def __init__(self, message: str):
        super().__init__(message, 400)

class InvariantError(ClientError):
    """A store-level invariant could not be satisfied"""

    def __init__(self, message: str):
        super().__init__(message, 400)

class NotFoundError(ClientError):
    """Referenced entity is absent"""

    def __init__(self, message: str):
        super().__init__(message, 404)

class AuthenticationError(ClientError):
    """Bad credentials or missing/invalid token"""

    def __init__(self, message: str):
        super().__init__(message, 401)

class AuthorizationError(ClientError):
    """Caller lacks rights on the resource"""

    def __init__(self, message: str):
        super().__init__(message, 403)

class PayloadTooLargeError(ClientError):
    def __init__(self, message: str):
        super().__init__(message, 413)


def fail_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
        headers=headers,
    )


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request payload"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"{location}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "Invalid request payload")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the centralized error-to-response mapping

    Every failure leaves the API in the same envelope:
        {"status": "fail", "message": "..."}
    """

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return fail_response(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return fail_response(400, _format_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return fail_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return fail_response(500, "The server encountered an unexpected condition")
