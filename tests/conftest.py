"""
Shared fixtures for the relay tests.

Upstream SDKs are never reached: chat goes through a fake client and leads go
through in-memory backends, unless a test patches the real client modules.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from astrosolar.app.services.chat_service import ChatService
from astrosolar.app.services.lead_service import LeadService
from astrosolar.domain.errors import StorageError
from astrosolar.domain.models import ChatResult, EnrichedLead
from astrosolar.infra.clients.base import LeadBackend
from astrosolar.shared.config import Settings
from main import create_app

ENV_KEYS = [
    "OPENAI_API_KEY", "OPENAI_API_URL", "OPENAI_TEXT_MODEL", "OPENAI_VISION_MODEL", "OPENAI_TIMEOUT",
    "AIRTABLE_API_KEY", "AIRTABLE_BASE_ID", "AIRTABLE_TABLE_NAME",
    "GOOGLE_SHEETS_ID", "GOOGLE_SERVICE_ACCOUNT_JSON",
    "SUPABASE_URL", "SUPABASE_ANON_KEY",
]


class FakeBackend(LeadBackend):
    """In-memory backend that records every lead it is asked to store."""

    def __init__(self, provider_name: str, configured: bool = True, error: Optional[Exception] = None):
        self.provider_name = provider_name
        self.configured = configured
        self.error = error
        self.delivered: List[EnrichedLead] = []

    def is_configured(self) -> bool:
        return self.configured

    def deliver(self, lead: EnrichedLead) -> str:
        self.delivered.append(lead)
        if self.error is not None:
            raise self.error
        return self.provider_name


# ===== DATA FIXTURES =====


@pytest.fixture
def lead_body():
    return {
        "name": "Jane Citizen",
        "email": "jane@example.com",
        "phone": "0400 000 000",
        "postcode": "2000",
        "interest": "solar+battery",
        "message": "Looking for quotes",
    }


@pytest.fixture
def chat_messages():
    return [
        {"role": "user", "content": "How big a system do I need?"},
        {"role": "assistant", "content": "What is your quarterly bill?"},
        {"role": "user", "content": "About $600."},
    ]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test")


@pytest.fixture
def fixed_clock():
    """Clock that moves forward one second per call."""
    start = datetime(2024, 5, 1, 9, 30, 0, 123000, tzinfo=timezone.utc)
    ticks = iter(range(1000))
    return lambda: start + timedelta(seconds=next(ticks))


# ===== MOCK FIXTURES =====


@pytest.fixture
def mock_chat_client():
    client = MagicMock()
    client.get_chat_completion = AsyncMock(
        return_value=ChatResult(message="A 6.6kW system should cover it.", usage={"total_tokens": 42})
    )
    return client


@pytest.fixture
def primary_backend():
    return FakeBackend("primary")


@pytest.fixture
def lead_service(primary_backend, fixed_clock):
    return LeadService([primary_backend], clock=fixed_clock)


# ===== APP FIXTURES =====


@pytest.fixture
def client(settings, mock_chat_client, lead_service):
    app = create_app(
        settings=settings,
        chat_service=ChatService(settings, client=mock_chat_client),
        lead_service=lead_service,
    )
    return TestClient(app)
