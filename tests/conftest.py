"""
Pytest configuration and fixtures
"""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from codequest_api.core.config import Settings
from codequest_api.core.database import create_session_maker
from codequest_api.main import create_app
from codequest_api.models import Project, Task, User


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file"""
    return Settings(_env_file=None, DATABASE_URL=None)  # type: ignore[call-arg]


@pytest.fixture
async def test_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Scratch SQLite database with the users/projects/tasks schema"""
    engine = create_async_engine(sqlite_url(tmp_path / "codequest_test.db"))
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_maker(test_engine)


@pytest.fixture
def app(settings: Settings, session_maker: async_sessionmaker[AsyncSession]) -> FastAPI:
    """App wired to the scratch database without running the startup checks"""
    app = create_app(settings)
    app.state.session_maker = session_maker
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def seed(session_maker: async_sessionmaker[AsyncSession]):
    """Insert rows in the given order and commit"""

    async def _seed(*rows: SQLModel) -> None:
        async with session_maker() as session:
            session.add_all(rows)
            await session.commit()

    return _seed


STAMP = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


def make_user(user_id: int, **overrides) -> User:
    values = {
        "id": user_id,
        "name": f"User {user_id}",
        "email": f"user{user_id}@example.com",
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    values.update(overrides)
    return User(**values)


def make_project(project_id: int, user_id: int, **overrides) -> Project:
    values = {
        "id": project_id,
        "name": f"Project {project_id}",
        "description": None,
        "user_id": user_id,
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    values.update(overrides)
    return Project(**values)


def make_task(task_id: int, project_id: int, **overrides) -> Task:
    values = {
        "id": task_id,
        "title": f"Task {task_id}",
        "description": None,
        "status": "todo",
        "project_id": project_id,
        "assigned_user_id": None,
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    values.update(overrides)
    return Task(**values)
