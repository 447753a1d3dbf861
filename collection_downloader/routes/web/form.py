"""
Form routes for the collection downloader.
Renders the download form behind the access key (web interface).
"""

from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from loguru import logger

from ... import config
from ...middleware.auth_middleware import AccessGate
from ...utils.template_env import get_templates

router = APIRouter()
templates = get_templates()


@router.get("/", response_class=HTMLResponse)
async def download_form(request: Request, key: Optional[str] = Query(None)):
    """Render the form when the `key` query value matches, the access denied page otherwise."""
    if not AccessGate.is_authorized(key):
        if key:
            logger.warning("Form access denied: access key mismatch")
        return templates.TemplateResponse(
            request,
            "access_denied.html",
            {"key_param": config.ACCESS_KEY_PARAM},
            status_code=403,
        )

    return templates.TemplateResponse(
        request,
        "index.html",
        {"api_key_header": config.API_KEY_HEADER},
    )
