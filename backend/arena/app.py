from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette import status
from starlette.responses import JSONResponse

from arena.config import config
from arena.database import database
from arena.routes import badges, tournament_teams, users
from arena.utils.alembic import alembic_run_migrations
from arena.utils.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if config.auto_run_migrations:
        alembic_run_migrations()

    await database.connect()
    logger.info("Connected to database")
    try:
        yield
    finally:
        await database.disconnect()


def parse_cors_origins(value: str) -> list[str]:
    if value.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]


app = FastAPI(title="Arena API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_cors_origins(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/ping", summary="Healthcheck ping")
async def ping() -> str:
    return "ping"


for router in (badges.router, tournament_teams.router, users.router):
    app.include_router(router)
