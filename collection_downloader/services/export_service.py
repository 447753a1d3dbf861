"""
Collection export service.
Reads a whole MongoDB collection and wraps it in the JSON export envelope.
"""

from __future__ import annotations

import base64
import math
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import Code, DBRef, Decimal128, MaxKey, MinKey, ObjectId, Regex, Timestamp
from loguru import logger

from .. import config, database

# Regex flag bits and the option letters MongoDB uses for them
_REGEX_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.LOCALE, "l"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.UNICODE, "u"),
    (re.VERBOSE, "x"),
)


class ExportError(Exception):
    """Base class for failures that abort an export."""


class ExportConfigurationError(ExportError):
    """Raised when the server is missing configuration needed for exports."""


class ExportUpstreamError(ExportError):
    """Raised when reading a collection from MongoDB or encoding it fails."""


def _regex_flags(flags: int) -> str:
    return "".join(letter for flag, letter in _REGEX_FLAG_LETTERS if flags & flag)


class ExportService:
    """Service for exporting a single MongoDB collection for download."""

    @staticmethod
    def _serialize_value(value: Any) -> Any:
        """Convert MongoDB-specific/complex values into JSON-serializable ones."""
        if value is None or isinstance(value, bool):
            return value
        # Code subclasses str, so it is checked before plain strings
        if isinstance(value, Code):
            if value.scope is None:
                return {"code": str(value)}
            return {"code": str(value), "scope": ExportService._serialize_value(value.scope)}
        if isinstance(value, (str, int)):
            return value
        if isinstance(value, float):
            # JSON has no NaN or Infinity
            return value if math.isfinite(value) else None
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.isoformat()
        if isinstance(value, Timestamp):
            return {"t": value.time, "i": value.inc}
        if isinstance(value, Decimal128):
            return str(value)
        if isinstance(value, bytes):
            return base64.b64encode(value).decode("ascii")
        if isinstance(value, uuid.UUID):
            return str(value)
        if isinstance(value, (Regex, re.Pattern)):
            return {"pattern": value.pattern, "flags": _regex_flags(value.flags)}
        if isinstance(value, MinKey):
            return {"$minKey": 1}
        if isinstance(value, MaxKey):
            return {"$maxKey": 1}
        if isinstance(value, DBRef):
            ref = {"$ref": value.collection, "$id": ExportService._serialize_value(value.id)}
            if value.database is not None:
                ref["$db"] = value.database
            return ref
        if isinstance(value, dict):
            return {str(k): ExportService._serialize_value(v) for k, v in value.items()}
        if isinstance(value, (list, tuple, set)):
            return [ExportService._serialize_value(v) for v in value]
        return str(value)

    @classmethod
    def build_export_payload(
        cls,
        database_name: str,
        collection_name: str,
        documents: List[Dict[str, Any]],
        exported_at: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """Build the response envelope; count always matches the data length."""
        data = [cls._serialize_value(document) for document in documents]
        exported_at = exported_at or datetime.now(timezone.utc)
        return {
            "collection": collection_name,
            "database": database_name,
            "count": len(data),
            "data": data,
            "exportedAt": exported_at.isoformat(),
        }

    @classmethod
    async def export_collection(
        cls,
        database_name: str,
        collection_name: str,
        *,
        uri: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Fetch every document of a collection in one query.

        Args:
            database_name: Database to read, used exactly as given
            collection_name: Collection to read, used exactly as given
            uri: Connection string; defaults to the configured MONGODB_URI

        Returns:
            The export envelope with collection, database, count, data and exportedAt

        Raises:
            ExportConfigurationError: If no connection string is configured
            ExportUpstreamError: If connecting, querying or serializing fails
        """
        mongo_uri = uri or config.MONGODB_URI
        if not mongo_uri:
            raise ExportConfigurationError("MONGODB_URI not configured")

        try:
            async with database.open_connection(mongo_uri) as client:
                collection = client[database_name][collection_name]
                # Unfiltered and unpaginated: the whole collection is held in memory.
                documents = await collection.find({}).to_list()
            payload = cls.build_export_payload(database_name, collection_name, documents)
        except Exception as exc:
            raise ExportUpstreamError(str(exc) or exc.__class__.__name__) from exc

        logger.info(
            f"Exported {payload['count']} documents from {database_name}.{collection_name}"
        )
        return payload


__all__ = [
    "ExportService",
    "ExportError",
    "ExportConfigurationError",
    "ExportUpstreamError",
]
