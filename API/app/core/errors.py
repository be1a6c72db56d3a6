import logging
import uuid

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class PlanningError(ValueError):
    """Invalid input to plan generation or plan updates.

    Subclasses set ``code`` and ``status_code``; the HTTP handler reports them as-is.
    """

    code = "planning_error"
    status_code = 422


class FormatError(PlanningError):
    """Time-of-day string that is not a valid HH:MM value."""


class InvalidDurationError(PlanningError):
    """Plan duration of zero or fewer days."""


class SessionNotFoundError(PlanningError):
    code = "session_not_found"
    status_code = 404

    def __init__(self, session_id: str, plan_id: str | None = None):
        self.session_id = session_id
        self.plan_id = plan_id
        where = f" in plan '{plan_id}'" if plan_id else ""
        super().__init__(f"Session '{session_id}' not found{where}")


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(request: Request, code: str, message: str, status_code: int, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "request_id": get_request_id(request),
                "details": details,
            },
        },
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(request, "http_error", str(exc.detail), exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(request, "validation_error", "Request validation failed", 422, details=exc.errors())


async def planning_exception_handler(request: Request, exc: PlanningError):
    logger.info("Planning request rejected | request_id=%s | %s: %s", get_request_id(request), type(exc).__name__, exc)
    return error_response(request, exc.code, str(exc), exc.status_code, details={"type": type(exc).__name__})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception | request_id=%s", get_request_id(request), exc_info=exc)
    return error_response(request, "internal_error", "Internal server error", 500)


async def request_id_middleware(request: Request, call_next):
    request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request.state.request_id
    return response
