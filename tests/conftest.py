"""Shared test fixtures: sample notes and an in-process API client."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from notediagram.config import Settings
from notediagram.main import app

SWIFT_CLASSES = (
    "class User { func login() {} }\n"
    "class AdminUser: User { func deleteUser() {} }"
)

NUMBERED_FLOW = (
    "1. Start process\n"
    "2. Check if user is logged in\n"
    "3. End process"
)

SEQUENCE_NOTES = (
    "User -> Frontend: Click login\n"
    "Frontend -> API: POST /auth/login\n"
    "API -> Database: Validate credentials\n"
    "Database -> API: Return user data\n"
    "API -> Frontend: Return JWT token\n"
    "Frontend -> User: Show dashboard"
)

LAYERED_NOTES = (
    "System Architecture:\n"
    "Presentation Layer: Web Frontend\n"
    "Business Layer: API Services\n"
    "Data Layer: Database\n"
    "External: Third-party APIs"
)


@pytest.fixture
def swift_classes() -> str:
    return SWIFT_CLASSES


@pytest.fixture
def numbered_flow() -> str:
    return NUMBERED_FLOW


@pytest.fixture
def sequence_notes() -> str:
    return SEQUENCE_NOTES


@pytest.fixture
def layered_notes() -> str:
    return LAYERED_NOTES


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """API client with default settings and no presentation delay."""
    app.state.settings = Settings(analysis_delay_seconds=0.0)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as c:
        yield c
