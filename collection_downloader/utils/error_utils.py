from typing import Mapping, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse
from ..utils.template_env import get_templates


def api_error_response(
    status_code: int,
    error: str,
    details: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Build the `{error}` / `{error, details}` body used by every API failure."""
    body = {"error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(body, status_code=status_code, headers=dict(headers or {}))


def render_error_page(
    request: Request,
    title: str = "Error",
    message: str = "An error occurred",
    status_code: int = 403,
) -> HTMLResponse:
    """Render a standardized error template for page requests."""
    templates = get_templates()
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": title,
            "message": message,
        },
        status_code=status_code,
    )
