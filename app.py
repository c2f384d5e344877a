from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI

from dotenv import load_dotenv

from typed_config import FieldTypeError

logger = logging.getLogger(__name__)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    from endpoints.config_endpoints import CONFIG_FILE, SETTINGS, STORE

    if SETTINGS.load_on_startup:
        try:
            await STORE.load(CONFIG_FILE)
        except FieldTypeError as e:
            logger.warning("CONFIG LOAD: %s is incompatible, keeping current values: %s", CONFIG_FILE, e)

    yield

    if SETTINGS.save_on_shutdown:
        await STORE.save(CONFIG_FILE)


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from endpoints.config_endpoints import router as config_router

    app = FastAPI(lifespan=lifespan)

    @app.get("/healthz")
    async def healthz():
        return {"ok": True}

    app.include_router(config_router)

    return app


app = create_app()
