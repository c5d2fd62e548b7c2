from fastapi.responses import JSONResponse
from typing import Optional
import traceback

from helpers.config import get_settings


def error_response(status_code: int, error: str,
                   details: Optional[str] = None,
                   exc: Optional[BaseException] = None) -> JSONResponse:
    """Build the JSON error body returned by every route.

    The stack trace of `exc` is attached only when running with
    NODE_ENV=development.
    """
    content = {"error": error}

    if details is not None:
        content["details"] = details

    if exc is not None and get_settings().is_development:
        content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    return JSONResponse(status_code=status_code, content=content)
