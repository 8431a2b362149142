"""
Test Configuration Module
"""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from sqlalchemy import Engine, text
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import StaticPool

from sqlrepo.db import create_async_db_engine, create_db_engine
from tests.fixtures import SCHEMA


# Use in-memory database for testing
TEST_DATABASE_URL = "sqlite://"
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create database engine for testing"""
    engine = create_db_engine(
        TEST_DATABASE_URL, echo=False, database_type="sqlite", poolclass=StaticPool
    )

    # Create all tables
    with engine.begin() as conn:
        for ddl in SCHEMA:
            conn.execute(text(ddl))

    yield engine

    engine.dispose()


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create async database engine for testing"""
    engine = create_async_db_engine(
        TEST_ASYNC_DATABASE_URL, echo=False, database_type="sqlite", poolclass=StaticPool
    )

    async with engine.begin() as conn:
        for ddl in SCHEMA:
            await conn.execute(text(ddl))

    yield engine

    await engine.dispose()
