import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from app.api.routes.audio import router as audio_router
from app.api.routes.health import router as health_router
from app.core.config import settings
from app.core.errors import AudioLookupError, BadRequestError
from app.core.logging import setup_logging
from app.storage.audio_files import get_storage_root
from app.storage.documents import get_document_root

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s starting (env=%s)", settings.APP_NAME, settings.ENV)

    # Missing stores are not fatal: every lookup will just fail with a 500
    for root in (get_document_root(), get_storage_root()):
        if not root.is_dir():
            logger.warning("Store directory missing: %s", root)

    logger.info("%s serving on port %s", settings.APP_NAME, settings.PORT)
    yield
    logger.info("%s exited", settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(health_router)
app.include_router(audio_router)


@app.exception_handler(BadRequestError)
async def bad_request_exception_handler(request: Request, exc: BadRequestError):
    logger.info("Bad request body: %s", exc.reason, extra={"path": request.url.path})

    return PlainTextResponse(status_code=400, content=str(exc))


@app.exception_handler(AudioLookupError)
async def audio_lookup_exception_handler(request: Request, exc: AudioLookupError):
    # Not found, unreadable and corrupt all look the same to the caller
    logger.warning(
        "Audio lookup failed (%s): %s",
        exc.kind.value,
        exc.message,
        extra={"path": request.url.path},
    )

    return PlainTextResponse(status_code=500, content=str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"path": request.url.path})

    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
