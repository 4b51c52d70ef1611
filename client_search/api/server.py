"""
HTTP query API for Client Search.

Endpoints:
- GET /health      service status and version
- GET /query       search records (q, field, limit, exact)
- GET /duplicates  records grouped by shared email
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from client_search import __version__
from client_search.logging import get_logger
from client_search.search.service import ClientSearch
from client_search.sources.base import RecordSource
from client_search.sources.exceptions import SourceError

logger = get_logger(__name__, component="api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(source: RecordSource) -> FastAPI:
    """Create the FastAPI application serving searches over ``source``."""
    app = FastAPI(
        title="Client Search API",
        description="Search client records and find duplicate emails",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    def build_service(errors: List[SourceError]) -> ClientSearch:
        return ClientSearch(source, on_source_error=errors.append)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok", "version": __version__}

    @app.get("/query", response_model=None)
    def query(
        q: Optional[str] = Query(None, description="Search text"),
        field: str = Query("full_name", description="Field to search"),
        limit: Optional[int] = Query(None, ge=1, description="Maximum number of results"),
        exact: bool = Query(False, description="Only return exact matches"),
    ):
        if q is None or not q.strip():
            return _error(400, "Query parameter 'q' is required")

        errors: List[SourceError] = []
        records = build_service(errors).search(q, field, limit=limit, exact=exact)
        if errors:
            return _error(502, str(errors[0]))

        return {"results": [record.to_dict() for record in records]}

    @app.get("/duplicates", response_model=None)
    def duplicates():
        errors: List[SourceError] = []
        groups = build_service(errors).find_duplicate_emails()
        if errors:
            return _error(502, str(errors[0]))

        return {
            "results": {
                email: [record.to_dict() for record in records]
                for email, records in groups.items()
            }
        }

    logger.debug(
        "API application created",
        extra={"event": "api.created", "source": source.description},
    )

    return app
