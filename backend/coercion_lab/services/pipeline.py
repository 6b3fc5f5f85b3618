"""
Request pipeline: raw body -> JSON -> union coercion -> (status, body).

This is the only place validation outcomes become transport-level responses.
Nothing below it raises for bad input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from coercion_lab.config import Settings
from coercion_lab.schemas.common import (
    DecodeErrorResponse,
    DetailedErrorResponse,
    ErrorDetail,
    MessageResponse,
    RouteInfo,
)
from coercion_lab.schemas.machines import DANGEROUS_OR, SAFE_SCHEMA_WITH_MULTI
from coercion_lab.validation import (
    DiscriminatedUnion,
    EnvelopeSchema,
    Invalid,
    coerce_envelope,
    describe,
    humanize,
)


@dataclass(frozen=True)
class Route:
    path: str
    schema: EnvelopeSchema

    @property
    def strategy(self) -> str:
        if isinstance(self.schema.union, DiscriminatedUnion):
            return "discriminated"
        return "undiscriminated"

    def info(self) -> RouteInfo:
        return RouteInfo(
            path=self.path,
            strategy=self.strategy,
            variants=[v.name for v in self.schema.union.variants],
        )


ROUTES: Dict[str, Route] = {
    "/dangerous-or": Route(path="/dangerous-or", schema=DANGEROUS_OR),
    "/safe-or": Route(path="/safe-or", schema=SAFE_SCHEMA_WITH_MULTI),
}

SUCCESS_MESSAGE = "Yay!"


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity/-Infinity by default; they are not JSON.
    raise ValueError(f"Non-JSON number literal: {name}")


@dataclass(frozen=True)
class PipelineResponse:
    status_code: int
    body: Any
    # Coerced body (UUIDs/Keywords decoded) on success; what a handler would work with.
    parameters: Optional[Dict[str, Any]] = None


def encode_error(result: Invalid, error_format: str) -> Any:
    if error_format == "detailed":
        return DetailedErrorResponse(
            humanized=humanize(result.errors),
            errors=[ErrorDetail(**d) for d in describe(result.errors)],
        ).model_dump(exclude_unset=True)
    return humanize(result.errors)


def handle(route: str, raw_body: Union[bytes, str], settings: Optional[Settings] = None) -> PipelineResponse:
    settings = settings or Settings()
    entry = ROUTES[route]

    try:
        payload = json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        print(f"[PIPELINE] Malformed JSON body on {route}: {e}")
        return PipelineResponse(status_code=400, body=DecodeErrorResponse().model_dump())

    result = coerce_envelope(entry.schema, payload)
    if isinstance(result, Invalid):
        if settings.log_errors:
            print(f"[COERCION] Schema validation errors on {route} ({entry.strategy}): {describe(result.errors)}")
        return PipelineResponse(status_code=400, body=encode_error(result, settings.error_format))

    return PipelineResponse(
        status_code=200,
        body=MessageResponse(msg=SUCCESS_MESSAGE).model_dump(),
        parameters=result.value,
    )
