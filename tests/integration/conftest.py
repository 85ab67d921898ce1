import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.depends import get_session

TEST_ACCOUNT_ID = "0b7d9c1e-2f3a-4b5c-8d9e-0f1a2b3c4d5e"


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path}/billing_test.db"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def app(db_session):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest_asyncio.fixture
async def client(app):
    """Test client authenticated as TEST_ACCOUNT_ID"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-Account-Id": TEST_ACCOUNT_ID, "X-User-Id": "user-1"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def anonymous_client(app):
    """Test client without identity headers"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def job(client):
    """A job for the test account, created through the API"""
    response = await client.post(
        "/jobs",
        json={"customerId": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d", "title": "Fix kitchen sink"},
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def invoice(client, job):
    """Invoice for 2h at 50 plus 30 in materials at 8% tax"""
    response = await client.post(
        "/invoices",
        json={
            "jobId": job["id"],
            "customerId": job["customerId"],
            "laborHours": "2",
            "hourlyRate": "50",
            "materialCost": "30",
            "taxRate": "0.08",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def account_id():
    return TEST_ACCOUNT_ID
