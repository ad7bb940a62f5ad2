"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from web.errors import register_exception_handlers
from web.models import Health
from web.routes import assistant, entries, search

logger = structlog.get_logger()

DEFAULT_PORT = 3001


def _cors_origins() -> list[str]:
    raw = os.getenv("FRONTEND_ORIGIN", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("web.startup")
    yield
    logger.info("web.shutdown")


app = FastAPI(
    title="DevKB API",
    version="1.0.0",
    lifespan=lifespan,
)

origins = _cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(search.router)
app.include_router(entries.router)
app.include_router(assistant.router)


@app.get("/health", response_model=Health)
async def health():
    return Health(status="ok", timestamp=datetime.now(timezone.utc))


def main() -> None:
    """Run the API with uvicorn (``devkb-api``)."""
    import uvicorn

    from cli.logging_config import setup_logging

    setup_logging(
        json_mode=os.getenv("DEVKB_LOG_JSON") == "1",
        level=os.getenv("DEVKB_LOG_LEVEL", "INFO"),
    )
    host = os.getenv("DEVKB_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    logger.info("web.listening", host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
