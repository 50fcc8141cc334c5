"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, AI config stubs, HTTP mock transports
Dependencies: pytest, sqlalchemy, httpx
System role: Test infrastructure and fixture management
"""

from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from backend.configs.ai import AiSettings
from backend.core.ai.config import ProviderConfig


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from backend.boundary.db.base import Base
    import backend.boundary.db.models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def ai_settings() -> AiSettings:
    """AI settings with an OpenAI key and no env file influence."""
    return AiSettings(
        _env_file=None,
        global_ai_type="openAi",
        openai_api_key="sk-test-key",
        openai_model_name="gpt-test",
    )


@pytest.fixture
def mock_provider() -> MagicMock:
    """
    Create mock AiProvider.

    Returns:
        MagicMock: Provider whose chat/multi_turn_chat are AsyncMocks
    """
    provider = MagicMock()
    provider.chat = AsyncMock(return_value="")
    provider.multi_turn_chat = AsyncMock(return_value="")
    return provider


@pytest.fixture
def mock_ai_config(ai_settings: AiSettings, mock_provider: MagicMock) -> MagicMock:
    """
    Create mock AiConfigService returning mock_provider for every function.

    Returns:
        MagicMock: Stand-in exposing settings, get_config and get_provider
    """
    ai_config = MagicMock()
    ai_config.settings = ai_settings
    ai_config.get_config.return_value = ProviderConfig(
        ai_type="openAi", api_key="sk-test-key", model_name="gpt-test"
    )
    ai_config.get_provider.return_value = mock_provider
    return ai_config


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """
    Build an httpx.AsyncClient backed by a MockTransport handler.

    Returns:
        Callable: handler -> AsyncClient
    """
    def factory(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
