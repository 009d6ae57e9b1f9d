"""
ccdupe - HTTP API Pydantic schemas.

Request and response models for POST /scan, POST /delete and GET /health.
Field names follow the JSON keys used by the browser client (camelCase).
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ScanRequest(BaseModel):
    """Body of POST /scan. `minSize` may be an integer or a numeric string."""

    directory: str = ""
    minSize: Optional[Union[int, str]] = None
    followSymlinks: bool = False


class ScanResponse(BaseModel):
    """Verified duplicate groups as lists of paths; `error` only for request-level failures."""

    results: List[List[str]] = Field(default_factory=list)
    error: Optional[str] = None


class DeleteRequest(BaseModel):
    """Body of POST /delete."""

    file: str = ""


class DeleteResponse(BaseModel):
    success: bool
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
