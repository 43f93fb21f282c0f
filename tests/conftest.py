"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from unittest.mock import Mock, AsyncMock
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.pop("OPENAI_API_KEY", None)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RESTAURANT_NAME", "Outta Sight Pizza")

from order_assistant.main import app
from order_assistant.db.database import get_db
from order_assistant.db.models import Base
from order_assistant.core.dependencies import get_order_interpreter
from order_assistant.services.interpreter.interpreter import OrderInterpreter
from order_assistant.services.interpreter.llm import OrderModelClient
from order_assistant.services.menu.catalog import MenuCatalog
from order_assistant.services.menu.in_memory_menu import InMemoryMenuProvider


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_completion(content):
    """Build a chat completion object shaped like the OpenAI SDK's."""
    completion = Mock()
    completion.choices = [Mock(message=Mock(content=content))]
    return completion


@pytest.fixture
def mock_openai():
    """Factory for mocked OpenAI clients returning fixed content or raising."""
    def _make(content=None, side_effect=None):
        mock_client = Mock()
        if side_effect is not None:
            mock_client.chat.completions.create = AsyncMock(side_effect=side_effect)
        else:
            mock_client.chat.completions.create = AsyncMock(return_value=make_completion(content))
        return mock_client
    return _make


@pytest.fixture
def menu_catalog():
    """Catalog loaded from the packaged menu."""
    return MenuCatalog(InMemoryMenuProvider())


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu_catalog(test_menu_path):
    """Catalog loaded from the small test menu."""
    return MenuCatalog(InMemoryMenuProvider(menu_file=str(test_menu_path)))


@pytest.fixture
def unconfigured_interpreter(menu_catalog):
    """Interpreter with no model credential."""
    return OrderInterpreter(catalog=menu_catalog, model_client=OrderModelClient(api_key=None))


@pytest.fixture
def make_interpreter(menu_catalog, mock_openai):
    """Factory for interpreters backed by a mocked model."""
    def _make(content=None, side_effect=None):
        client = mock_openai(content=content, side_effect=side_effect)
        interpreter = OrderInterpreter(
            catalog=menu_catalog,
            model_client=OrderModelClient(client=client),
        )
        return interpreter, client
    return _make


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db(test_db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def clean_auth_sessions():
    """Clean up authentication sessions before and after tests."""
    from order_assistant.api import auth
    auth._sessions.clear()
    yield
    auth._sessions.clear()


@pytest.fixture
def test_client(unconfigured_interpreter, clean_auth_sessions):
    """Create FastAPI test client with an isolated database.

    Tables are created lazily on the client's own event loop, since the
    aiosqlite connection must live on the loop that serves requests.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    state = {"ready": False}

    async def _override_get_db():
        if not state["ready"]:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            state["ready"] = True
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_order_interpreter] = lambda: unconfigured_interpreter

    with TestClient(app) as client:
        yield client
        client.portal.call(engine.dispose)

    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(test_client):
    """Create test client with valid session cookie."""
    response = test_client.post("/api/auth/login", json={"email": "Pat@Example.com"})
    assert response.status_code == 200
    return test_client
