import logging
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from achievements import router as achievements_router
from auth import router as auth_router
from core import db, errors, schema, settings
from games import router as games_router
from items import router as items_router
from players import router as players_router
from players import service as players_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if settings.db_auto_schema():
            await schema.apply_schema()
        await players_service.ensure_bootstrap_admin()
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Game catalog API", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(games_router.router, tags=["games"])
app.include_router(achievements_router.router, tags=["achievements"])
app.include_router(items_router.router, tags=["items"])
app.include_router(players_router.router, tags=["players"])
app.include_router(auth_router.router, tags=["auth"])


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed payloads are a client error, reported as 400.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(errors.ConflictError)
async def conflict_error_handler(_: Request, exc: errors.ConflictError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(asyncpg.PostgresError)
async def store_error_handler(_: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    logger.exception("Store failure: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Store failure."},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "game catalog api"}
