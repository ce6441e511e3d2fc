"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger

# Registers the ORM models on Base.metadata before create_all
import src.service.catalog.driven_adapter.model  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Catalog] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Catalog] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Catalog] Database tables ready')

    yield

    Logger.base.info('🛑 [Catalog] Shutting down...')
    await dispose_engine()
    container.unwire()
    cleanup()
    Logger.base.info('👋 [Catalog] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
