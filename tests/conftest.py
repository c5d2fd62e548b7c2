"""Shared fixtures: fake providers with call counters and an ASGI test client.

The app's startup event is not run by ASGITransport, so the fixtures attach
the providers and template parser directly, the same attributes startup sets.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from main import app as fastapi_app
from stores.LLM.templates import TemplateParser


class FakeSummarizationProvider:
    """Stands in for an LLM provider; records every call."""

    def __init__(self, summary: str = "A test.", error: Exception | None = None):
        self.summary = summary
        self.error = error
        self.calls: list[dict] = []
        self.summarization_model_id = None

    async def set_summarization_model(self, summarization_model_id: str):
        self.summarization_model_id = summarization_model_id

    async def summarize_text(self, user_prompt: str, system_prompt: str = ""):
        self.calls.append({"user_prompt": user_prompt, "system_prompt": system_prompt})
        if self.error is not None:
            raise self.error
        return self.summary


class FakeEmailProvider:
    """Stands in for an email provider; records every call."""

    def __init__(self, message_id: str = "abc", error: Exception | None = None):
        self.message_id = message_id
        self.error = error
        self.calls: list[dict] = []

    async def send_email(self, recipients, subject, body):
        self.calls.append({"recipients": recipients, "subject": subject, "body": body})
        if self.error is not None:
            raise self.error
        return {"message_id": self.message_id}


@pytest.fixture(autouse=True)
def production_env(monkeypatch):
    """Run every test as production unless it opts into development."""
    monkeypatch.setenv("NODE_ENV", "production")


@pytest.fixture
def llm_provider() -> FakeSummarizationProvider:
    return FakeSummarizationProvider()


@pytest.fixture
def email_provider() -> FakeEmailProvider:
    return FakeEmailProvider()


@pytest.fixture
def template_parser() -> TemplateParser:
    return TemplateParser(lang="en", default_lang="en")


@pytest.fixture
def app(llm_provider, email_provider, template_parser):
    fastapi_app.summarization_client = llm_provider
    fastapi_app.email_client = email_provider
    fastapi_app.template_parser = template_parser
    return fastapi_app


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing the API."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
