"""Pytest fixtures for fieldops tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from fieldops.api.app import create_app
from fieldops.api.dependencies import get_db_session
from fieldops.database import create_schema, make_session_factory
from fieldops.models import CompanyProfile, Employee, RolePermissions, TimeEntry

# In-memory SQLite shared across sessions of one test
TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_EMAIL = "owner@co.com"
FOREMAN_EMAIL = "jane@co.com"
LABOURER_EMAIL = "lou@co.com"
FIELD_EMAIL = "sam@co.com"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with a fresh schema."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with make_session_factory(engine)() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_db(session: AsyncSession) -> AsyncSession:
    """Employees, a company profile, one stored role and some hours."""
    session.add_all(
        [
            Employee(id="emp-admin", name="Olive Owner", role="Admin", email=ADMIN_EMAIL),
            Employee(id="emp-jane", name="Jane Foreman", role="Foreman", email=FOREMAN_EMAIL),
            Employee(id="emp-lou", name="Lou Labourer", role="Labourer", email=LABOURER_EMAIL),
            Employee(id="emp-sam", name="Sam Field", role="Field Crew", email=FIELD_EMAIL),
            Employee(
                id="emp-old",
                name="Otto Former",
                role="Operator",
                email="otto@co.com",
                status="inactive",
            ),
            CompanyProfile(
                name="Test Construction",
                pay_period_type="bi-weekly",
                pay_period_start_date="2026-01-05",
            ),
            RolePermissions(
                id="role-field-crew",
                role="Field Crew",
                permissions=["field.view", "time-tracking.view", "time-tracking.create"],
                description="Field-only crew",
            ),
            TimeEntry(
                work_date=date(2026, 1, 19),
                employee_id="emp-jane",
                hours=Decimal("8.00"),
                approval="approved",
            ),
            TimeEntry(
                work_date=date(2026, 1, 20),
                employee_id="emp-jane",
                hours=Decimal("6.50"),
                approval="pending",
            ),
            TimeEntry(
                work_date=date(2026, 1, 20),
                employee_id="emp-lou",
                hours=Decimal("9.00"),
                approval="rejected",
            ),
            TimeEntry(
                work_date=date(2026, 2, 2),
                employee_id="emp-lou",
                hours=Decimal("8.00"),
                approval="approved",
            ),
        ]
    )
    await session.commit()
    return session


@pytest_asyncio.fixture
async def client(engine: AsyncEngine, seeded_db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    app = create_app()
    factory = make_session_factory(engine)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as db:
            yield db

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def as_user():
    """Build request headers for a caller and optional preview session."""

    def headers(email: str | None = None, session_id: str | None = None) -> dict[str, str]:
        result: dict[str, str] = {}
        if email is not None:
            result["X-User-Email"] = email
        if session_id is not None:
            result["X-Session-ID"] = session_id
        return result

    return headers
