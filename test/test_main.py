"""
Test-specific FastAPI Application

Same routers and handlers as production; the database is the temporary
sqlite file configured in conftest.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger
import src.service.catalog.driven_adapter.model  # noqa: F401


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🧪 [Test App] Starting up...')

    await create_db_and_tables()
    container.wire(modules=WIRE_MODULES)

    yield

    await dispose_engine()
    container.unwire()
    Logger.base.info('🧪 [Test App] Shutdown complete')


app = create_app(lifespan=lifespan_for_tests, title_suffix=' (Test)')
