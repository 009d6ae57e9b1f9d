"""
ccdupe - FastAPI application.

Routes are thin adapters over DuplicateScanCommand and FileService:
- POST /scan   : scan a directory and return verified duplicate groups
- POST /delete : delete a single file, only on explicit request
- GET  /health : liveness probe

Every request builds its own ScanParams; nothing is shared between requests
except the app-level deletion policy (`use_trash`). Route functions are plain
`def`, so FastAPI runs them on its threadpool.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ccdupe import __version__
from ccdupe.commands import DuplicateScanCommand
from ccdupe.core.errors import CcdupeError
from ccdupe.core.models import ScanParams
from ccdupe.services.file_service import FileService
from ccdupe.web.schemas import (
    DeleteRequest,
    DeleteResponse,
    HealthResponse,
    ScanRequest,
    ScanResponse,
)

logger = logging.getLogger(__name__)


def create_app(use_trash: bool = False) -> FastAPI:
    """Factory to create the FastAPI application."""
    app = FastAPI(
        title="ccdupe",
        description="Find byte-identical files and delete redundant copies",
        version=__version__,
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed bodies get the same response shape as the route would return."""
        errors = exc.errors()
        detail = errors[0].get("msg", "invalid body") if errors else "invalid body"
        message = f"Invalid request format: {detail}"
        logger.error(f"{request.url.path}: {message}")
        if request.url.path == "/delete":
            content = DeleteResponse(success=False, error=message)
        else:
            content = ScanResponse(error=message)
        return JSONResponse(status_code=400, content=content.model_dump(exclude_none=True))

    # --- Routes ---

    @app.get("/health", response_model=HealthResponse, summary="Liveness probe")
    def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    @app.post(
        "/scan",
        response_model=ScanResponse,
        response_model_exclude_none=True,
        summary="Scan a directory for duplicates",
    )
    def scan(body: ScanRequest) -> ScanResponse:
        if not body.directory:
            return ScanResponse(error="Directory path is required")

        try:
            params = ScanParams.from_human_readable(
                root_dir=body.directory,
                min_size=body.minSize,
                follow_symlinks=body.followSymlinks,
            )
        except ValueError:
            return ScanResponse(error="Invalid minimum size value")

        try:
            result = DuplicateScanCommand().execute(params)
        except CcdupeError as e:
            logger.error(f"Error scanning directory {body.directory}: {e}")
            return ScanResponse(error=f"Error scanning directory: {e}")

        return ScanResponse(results=[list(group.paths) for group in result.groups])

    @app.post(
        "/delete",
        response_model=DeleteResponse,
        response_model_exclude_none=True,
        summary="Delete one file",
    )
    def delete(body: DeleteRequest) -> DeleteResponse:
        if not body.file:
            return DeleteResponse(success=False, error="File path is required")

        try:
            FileService.delete_file(body.file, use_trash=use_trash)
        except CcdupeError as e:
            logger.error(f"Error deleting file {body.file}: {e}")
            return DeleteResponse(success=False, error=f"Error deleting file: {e}")

        return DeleteResponse(success=True)

    return app
