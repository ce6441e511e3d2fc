"""
Test Configuration and Fixtures

- Environment setup (temporary sqlite database, test log directory)
- Session-scoped TestClient running the real app
- Per-test table cleanup for integration tests
- User fixtures registered through the API

Unit tests (marked `unit`) never touch the client or the database.
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    db_dir = Path(tempfile.mkdtemp(prefix='catalog_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / "catalog_test.db"}'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key')
    os.environ['DEBUG'] = 'true'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from test.shared.utils import create_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ANOTHER_SELLER_EMAIL,
    ANOTHER_SELLER_FIRST_NAME,
    ANOTHER_SELLER_LAST_NAME,
    DEFAULT_PASSWORD,
    TEST_BUYER_EMAIL,
    TEST_BUYER_FIRST_NAME,
    TEST_BUYER_LAST_NAME,
    TEST_SELLER_EMAIL,
    TEST_SELLER_FIRST_NAME,
    TEST_SELLER_LAST_NAME,
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        # First in line: user fixtures register through the API after the wipe
        if 'unit' not in markers and 'clean_database' not in item.fixturenames:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Cleanup
# =============================================================================
async def _clean_all_tables() -> None:
    from src.platform.config.core_setting import settings
    from src.platform.database.orm_db_setting import Base

    # Own engine: the app's engine belongs to the TestClient's event loop
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(table.delete())
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
def clean_database(client: TestClient) -> Generator[None, None, None]:
    asyncio.run(_clean_all_tables())
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


# =============================================================================
# User Fixtures (function-scoped: tables are emptied before every test)
# =============================================================================
@pytest.fixture
def seller_user(client: TestClient, clean_database: None) -> dict[str, Any]:
    return create_user(
        client,
        email=TEST_SELLER_EMAIL,
        password=DEFAULT_PASSWORD,
        first_name=TEST_SELLER_FIRST_NAME,
        last_name=TEST_SELLER_LAST_NAME,
        role='seller',
    )


@pytest.fixture
def another_seller_user(client: TestClient, clean_database: None) -> dict[str, Any]:
    return create_user(
        client,
        email=ANOTHER_SELLER_EMAIL,
        password=DEFAULT_PASSWORD,
        first_name=ANOTHER_SELLER_FIRST_NAME,
        last_name=ANOTHER_SELLER_LAST_NAME,
        role='seller',
    )


@pytest.fixture
def buyer_user(client: TestClient, clean_database: None) -> dict[str, Any]:
    return create_user(
        client,
        email=TEST_BUYER_EMAIL,
        password=DEFAULT_PASSWORD,
        first_name=TEST_BUYER_FIRST_NAME,
        last_name=TEST_BUYER_LAST_NAME,
        role='buyer',
    )
