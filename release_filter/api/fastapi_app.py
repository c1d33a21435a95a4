from contextlib import asynccontextmanager

from fastapi import FastAPI

from release_filter.api.routes import router as filter_router
from release_filter.api.routes import stop_config_store
from release_filter.config import LOG_LEVEL
from release_filter.core import configure_logging

configure_logging(LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    yield
    # the config file observer thread
    stop_config_store()


app = FastAPI(
    title="Release Filter API",
    version="0.1.0",
    description="Keep or drop music releases by year and genre tags.",
    lifespan=lifespan,
)

app.include_router(filter_router, prefix="/filter", tags=["filter"])
