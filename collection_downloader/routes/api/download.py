"""
Export routes for the collection downloader.
Provides the endpoint that returns a whole collection as JSON (API).
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from loguru import logger

from ...middleware.auth_middleware import ApiKeyAuth
from ...services.export_service import ExportError, ExportService
from ...utils.error_utils import api_error_response

router = APIRouter()

MISSING_PARAMS_DETAIL = "Missing required parameters: collection and database"
EXPORT_FAILED_DETAIL = "Failed to download collection"


@router.get("/download")
async def download_collection(
    request: Request,
    database: Optional[str] = Query(None),
    collection: Optional[str] = Query(None),
):
    """Return every document of `database.collection` for a caller holding the API key."""
    ApiKeyAuth.require_api_key(request)

    if not database or not collection:
        raise HTTPException(status_code=400, detail=MISSING_PARAMS_DETAIL)

    try:
        return await ExportService.export_collection(database, collection)
    except ExportError as export_error:
        logger.error(
            f"Error downloading collection {database}.{collection}: {export_error}"
        )
        return api_error_response(500, EXPORT_FAILED_DETAIL, details=str(export_error))
