# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
HTTP routes for the style guide service.

Routes::

    GET  /health                {"status": "ok", "timestamp": ...}
    GET  /styles.css            stylesheet for the current config
    GET  /api/config            current config
    POST /api/config            merge, validate and store a config
    POST /api/config/reset      restore defaults
    GET  /api/config/export     config as an indented JSON attachment
    POST /api/config/import     raw JSON text, merged and stored
    POST /api/config/validate   warnings only, nothing stored
    GET  /api/palettes          annotated swatches for the current config
    POST /api/color/convert     {from, value} -> {oklch, rgb, hex}
    POST /api/color/contrast    {foreground, background, isLargeText?}
    POST /api/color/match       {color} -> nearest CSS color or null
    GET  /api/colors/css        every CSS named color
    POST /api/palette/generate  {baseColor} -> semantic palette, stored

Malformed bodies get FastAPI's 422. Input that validates but cannot be
acted on (unknown format, bad hex, invalid configuration) gets 400 with
the reason in ``detail``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from styleguide.config.loader import ConfigError
from styleguide.config.store import ConfigStore
from styleguide.runtime import api
from styleguide.runtime.api import RequestError
from styleguide.runtime.models import (
    ContrastRequest,
    ConvertRequest,
    GenerateRequest,
    MatchRequest,
)

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "style-guide-config.json"

router = APIRouter()


def get_store(request: Request) -> ConfigStore:
    return request.app.state.store


def _bad_request(e: Exception) -> HTTPException:
    logger.warning("Request rejected: %s", e)
    return HTTPException(status_code=400, detail=str(e))


# =============================================================================
# Service
# =============================================================================


@router.get("/health")
def health():
    return api.health()


@router.get("/styles.css", response_class=PlainTextResponse)
def stylesheet(store: ConfigStore = Depends(get_store)):
    return PlainTextResponse(api.stylesheet(store), media_type="text/css")


# =============================================================================
# Configuration
# =============================================================================


@router.get("/api/config")
def get_config(store: ConfigStore = Depends(get_store)):
    return api.get_config(store)


@router.post("/api/config")
def update_config(
    partial: Dict[str, Any] = Body(...),
    store: ConfigStore = Depends(get_store),
):
    try:
        return api.update_config(partial, store)
    except ConfigError as e:
        raise _bad_request(e) from e


@router.post("/api/config/reset")
def reset_config(store: ConfigStore = Depends(get_store)):
    return api.reset_config(store)


@router.get("/api/config/export")
def export_config(store: ConfigStore = Depends(get_store)):
    return Response(
        content=api.export_config(store),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.post("/api/config/import")
async def import_config(request: Request, store: ConfigStore = Depends(get_store)):
    raw = await request.body()
    try:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RequestError("Request body must be UTF-8") from e
        return api.import_config(text, store)
    except (RequestError, ConfigError) as e:
        raise _bad_request(e) from e


@router.post("/api/config/validate")
def validate_config(partial: Dict[str, Any] = Body(...)):
    try:
        return api.validate_config_request(partial)
    except ConfigError as e:
        raise _bad_request(e) from e


@router.get("/api/palettes")
def describe_palettes(store: ConfigStore = Depends(get_store)):
    return api.describe_palettes(store)


# =============================================================================
# Colors
# =============================================================================


@router.post("/api/color/convert")
def convert_color(request: ConvertRequest):
    try:
        return api.convert_color(request)
    except RequestError as e:
        raise _bad_request(e) from e


@router.post("/api/color/contrast")
def contrast(request: ContrastRequest):
    return api.contrast(request)


@router.post("/api/color/match")
def match_color(request: MatchRequest):
    return api.match_color(request)


@router.get("/api/colors/css")
def list_named_colors():
    return api.list_named_colors()


@router.post("/api/palette/generate")
def generate_palette(request: GenerateRequest, store: ConfigStore = Depends(get_store)):
    return api.generate_palette(request, store)


def create_app(store: Optional[ConfigStore] = None) -> FastAPI:
    """
    Build the service application.

    Args:
        store: Configuration store to serve; a fresh default store if omitted
    """
    app = FastAPI(title="Style Guide")
    app.state.store = store if store is not None else ConfigStore()
    app.include_router(router)
    return app
