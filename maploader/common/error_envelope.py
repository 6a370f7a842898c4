"""Error envelope raised by the map loader HTTP routes.

Body shape (under FastAPI's ``detail`` key):
{
  "error": {
    "code": "map_loader.invalid_scene",
    "message": "...",
    "http_status": 400,
    "resource_kind": "scene",
    "details": {}
  }
}
"""
from __future__ import annotations

from typing import Any, Dict, NoReturn, Optional

from fastapi import HTTPException
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    code: str
    message: str
    http_status: int
    resource_kind: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    error: ErrorDetail


def error_response(
    code: str,
    message: str,
    status_code: int = 400,
    resource_kind: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> NoReturn:
    """Raise an HTTPException whose detail is an ErrorEnvelope."""
    envelope = ErrorEnvelope(
        error=ErrorDetail(
            code=code,
            message=message,
            http_status=status_code,
            resource_kind=resource_kind,
            details=details or {},
        )
    )
    raise HTTPException(status_code=status_code, detail=envelope.model_dump())
