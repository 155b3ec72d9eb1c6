from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from ...api import api_state, call_api, get_api_functions
from ...api.models import StartDateRequest
from ...api.serializers import serialize_state
from ...assets import templates_dir
from ...config import AppSettings, get_settings
from ...domain import LensTrackerError, format_iso_date, today_in
from ...logging import configure_logging
from ..tracker import LensTracker

logger = logging.getLogger(__name__)

app = FastAPI(title="Lens Tracker", version="0.1.0")
templates = Jinja2Templates(directory=templates_dir())

SERVICE_WORKER_CACHE = "lens-tracker-v1"

_ICON_192 = (
    'data:image/svg+xml,<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 256"><defs>'
    '<linearGradient id="g" x1="0" y1="0" x2="1" y2="1"><stop offset="0%" stop-color="%230ea5e9"/>'
    '<stop offset="100%" stop-color="%236367f2"/></linearGradient></defs>'
    '<rect width="256" height="256" rx="56" fill="%230f172a"/>'
    '<path fill="url(%23g)" d="M64 88c0-18 14-32 32-32h64c18 0 32 14 32 32 0 48-28 88-64 88s-64-40-64-88Z"/>'
    '<circle cx="128" cy="116" r="22" fill="%23e0f2fe"/></svg>'
)
_ICON_512 = (
    'data:image/svg+xml,<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 512 512"><defs>'
    '<linearGradient id="g" x1="0" y1="0" x2="1" y2="1"><stop offset="0%" stop-color="%230ea5e9"/>'
    '<stop offset="100%" stop-color="%236367f2"/></linearGradient></defs>'
    '<rect width="512" height="512" rx="112" fill="%230f172a"/>'
    '<path fill="url(%23g)" d="M128 176c0-36 28-64 64-64h128c36 0 64 28 64 64 0 96-56 176-128 176s-128-80-128-176Z"/>'
    '<circle cx="256" cy="232" r="44" fill="%23e0f2fe"/></svg>'
)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def get_tracker() -> LensTracker:
    return api_state.tracker


def build_manifest(settings: AppSettings) -> Dict[str, Any]:
    return {
        "name": settings.ui.app_name,
        "short_name": settings.ui.short_name,
        "start_url": ".",
        "display": "standalone",
        "background_color": settings.ui.background_color,
        "theme_color": settings.ui.theme_color,
        "icons": [
            {"src": _ICON_192, "sizes": "192x192", "type": "image/svg+xml"},
            {"src": _ICON_512, "sizes": "512x512", "type": "image/svg+xml"},
        ],
    }


@app.get("/", response_class=HTMLResponse)
def index(request: Request, tracker: LensTracker = Depends(get_tracker)) -> HTMLResponse:
    settings = get_settings()
    state = tracker.get_state()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.ui.app_name,
            "theme_color": settings.ui.theme_color,
            "state": serialize_state(state),
            "is_set": state.is_set,
            "today": format_iso_date(today_in(state.timezone)),
        },
    )


@app.get("/manifest.webmanifest")
def manifest() -> JSONResponse:
    return JSONResponse(build_manifest(get_settings()), media_type="application/manifest+json")


@app.get("/sw.js")
def service_worker() -> Response:
    script = templates.get_template("sw.js").render(
        cache_name=SERVICE_WORKER_CACHE,
        precache=["./", "manifest.webmanifest"],
    )
    return Response(content=script, media_type="application/javascript")


@app.get("/api/state")
def read_state(tracker: LensTracker = Depends(get_tracker)) -> JSONResponse:
    return JSONResponse(serialize_state(tracker.get_state()))


@app.post("/api/start-date")
def save_start_date(
    payload: Optional[StartDateRequest] = None,
    tracker: LensTracker = Depends(get_tracker),
) -> JSONResponse:
    start_date = payload.start_date if payload else None
    try:
        state = tracker.save_start_date(start_date)
    except LensTrackerError as exc:
        logger.warning("Rejected start date %r: %s", start_date, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return JSONResponse(serialize_state(state))


@app.get("/api/functions")
def list_api_functions() -> JSONResponse:
    functions = [func.describe() for func in get_api_functions()]
    return JSONResponse({"functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except LensTrackerError as exc:
        logger.warning("API function %s rejected input: %s", function_name, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    configure_logging(get_settings())
    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Lens Tracker on http://%s:%s", host, port)
    asyncio.run(serve(app, config))
