from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response

from settings import get_settings
from typed_config import AsyncConfigStore, ConfigStore, FieldTypeError

router = APIRouter(tags=["config"])
logger = logging.getLogger(__name__)

# Centralized settings
SETTINGS = get_settings()

CONFIG_FILE = SETTINGS.config_file
DEBUG_LOG_REQUESTS = SETTINGS.debug_log_requests

# Operates on GLOBAL_REGISTRY; fields declared anywhere in the process show up here.
STORE = AsyncConfigStore(ConfigStore(SETTINGS.config_dir))


def _json_response(text: str) -> Response:
    return Response(content=text, media_type="application/json")


@router.get("/config")
async def get_config() -> Response:
    return _json_response(await STORE.get())


@router.put("/config")
async def put_config(request: Request) -> Response:
    body = await request.body()
    if DEBUG_LOG_REQUESTS:
        logger.info("CONFIG PUT: %d bytes", len(body))
    try:
        await STORE.set(body)
    except FieldTypeError as e:
        raise HTTPException(status_code=422, detail={"key": e.key, "error": str(e)}) from e
    return _json_response(await STORE.get())


@router.post("/config/load")
async def load_config() -> dict[str, Any]:
    try:
        ok = await STORE.load(CONFIG_FILE)
    except FieldTypeError as e:
        raise HTTPException(status_code=422, detail={"key": e.key, "error": str(e)}) from e
    return {"file": CONFIG_FILE, "ok": ok}


@router.post("/config/save")
async def save_config() -> dict[str, Any]:
    ok = await STORE.save(CONFIG_FILE)
    return {"file": CONFIG_FILE, "ok": ok}
