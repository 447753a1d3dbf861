"""
Main FastAPI application for the collection downloader.
Wires the form page, the export API, middleware and error handling together.
"""

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger

from . import config
from .logging_setup import configure_logging
from .middleware.request_logging import RequestLoggingMiddleware
from .middleware.security_headers import SecurityHeadersMiddleware
from .routes.api import download as api_download
from .routes.web import form
from .utils.error_utils import api_error_response, render_error_page

API_PREFIX = "/api"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """JSON `{error}` bodies under /api, the HTML error page everywhere else."""
    if request.url.path.startswith(API_PREFIX + "/") or request.url.path == API_PREFIX:
        detail = exc.detail
        if exc.status_code == 405:
            detail = "Method not allowed"
        return api_error_response(exc.status_code, str(detail), headers=exc.headers)

    if exc.status_code == 404:
        return render_error_page(
            request,
            title="404 Not Found",
            message="The page you're looking for doesn't exist.",
            status_code=404,
        )
    return render_error_page(
        request,
        title=f"{exc.status_code} Error",
        message=str(exc.detail),
        status_code=exc.status_code,
    )


def create_app() -> FastAPI:
    """Build the application with its middleware, routers and handlers."""
    configure_logging()

    app = FastAPI(title=config.APP_TITLE, description=config.APP_DESCRIPTION)
    app.mount("/static", StaticFiles(directory=config.STATIC_DIR), name="static")

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(form.router)
    app.include_router(api_download.router, prefix=API_PREFIX)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    if not config.MONGODB_URI:
        logger.warning("MONGODB_URI not set; exports will fail until it is configured")
    if not config.API_KEY:
        logger.warning("API_KEY not set; every export request will be rejected")
    if not config.ACCESS_KEY:
        logger.warning("ACCESS_KEY not set; the download form will stay hidden")
    logger.info(f"{config.APP_TITLE} application created")
    return app


app = create_app()

