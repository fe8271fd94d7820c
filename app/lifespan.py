import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.config.environments import LOG_LEVEL
from app.db.database import Base, engine

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("App starting up...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield
    logger.info("App shutting down...")
    await engine.dispose()
