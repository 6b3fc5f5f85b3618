from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from coercion_lab.config import Settings, load_env_file, load_settings
from coercion_lab.schemas.common import MessageResponse, RouteInfo
from coercion_lab.services.pipeline import ROUTES, handle


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


_POST_RESPONSES = {
    200: {"model": MessageResponse},
    400: {"description": "Malformed JSON body, or a field -> error messages map (nested like the input)"},
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Two routes that differ only in the schema their body is coerced against:

    - POST /dangerous-or: `data` is an undiscriminated union
    - POST /safe-or: `data` dispatches on `data.type` first

    Bodies are read raw and run through the coercion pipeline; FastAPI's own
    body validation is not involved.
    """
    settings = settings or load_settings()

    app = FastAPI(title="Union Coercion Lab", default_response_class=UTF8JSONResponse)

    # Allow the local dev frontend to call the API from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _respond(route: str, body: bytes) -> UTF8JSONResponse:
        out = handle(route, body, settings)
        return UTF8JSONResponse(status_code=out.status_code, content=out.body)

    @app.post("/dangerous-or", responses=_POST_RESPONSES)
    async def dangerous_or(request: Request):
        return _respond("/dangerous-or", await request.body())

    @app.post("/safe-or", responses=_POST_RESPONSES)
    async def safe_or(request: Request):
        return _respond("/safe-or", await request.body())

    @app.get("/routes", response_model=list[RouteInfo])
    async def list_routes():
        """Route table: which strategy each endpoint coerces with."""
        return [r.info() for r in ROUTES.values()]

    return app


load_env_file()
app = create_app()
