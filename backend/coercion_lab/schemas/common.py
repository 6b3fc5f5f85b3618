from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class APIModel(BaseModel):
    """
    Common base for API schemas:
    - forbid unknown keys (prevents silent typos in payloads)
    - keep things predictable across endpoints
    """

    model_config = ConfigDict(extra="forbid")


class MessageResponse(APIModel):
    msg: str


class DecodeErrorResponse(APIModel):
    type: str = Field(default="decode-error")
    msg: str = Field(default="Malformed application/json request.")


class ErrorDetail(APIModel):
    path: list[str]
    message: str
    value: Any = None


class DetailedErrorResponse(APIModel):
    # Either the nested field -> messages map, or a bare list when the whole body had the wrong type.
    humanized: dict[str, Any] | list[str]
    errors: list[ErrorDetail]


class RouteInfo(APIModel):
    path: str
    method: str = "POST"
    strategy: str
    variants: list[str]
