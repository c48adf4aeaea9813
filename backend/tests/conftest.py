"""
Pytest configuration for the API tests.

The app runs against an in-memory SQLite database and a fake completion
provider, both swapped in through FastAPI dependency overrides.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_certification.db")
os.environ["GROQ_API"] = ""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from certification_api.main import app
from certification_api.core.database import Base, get_async_db
from certification_api.core.exceptions import UpstreamError
from certification_api.api.deps import get_completion_service
from certification_api import models  # noqa: F401


class FakeCompletionService:
    """Records prompts and answers with a canned reply"""

    def __init__(self, reply="Score: 8/10\nFeedback: nice", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, prompt, max_tokens=700):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens})
        if self.error:
            raise self.error
        return self.reply


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def fake_completion():
    return FakeCompletionService()


@pytest.fixture
def failing_completion():
    return FakeCompletionService(error=UpstreamError("provider down"))


@pytest_asyncio.fixture
async def client(session_factory, fake_completion):
    async def override_get_async_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db
    app.dependency_overrides[get_completion_service] = lambda: fake_completion

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
