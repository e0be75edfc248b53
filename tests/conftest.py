from __future__ import annotations

import os

os.environ.setdefault("APP_LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_DEMO_DATA", "true")

import itertools
from collections.abc import AsyncGenerator, Callable
from datetime import date, timedelta

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from crmdesk.main import create_app
from crmdesk.services.crm import CRMService
from crmdesk.store import InMemoryCRMStore, build_demo_store

START_DATE = date(2026, 1, 5)


class FakeClock:
    """Callable clock that only moves when a test tells it to."""

    def __init__(self, today: date = START_DATE) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> None:
        self.today += timedelta(days=days)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def id_factory() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store(clock: FakeClock, id_factory: Callable[[], str]) -> InMemoryCRMStore:
    return InMemoryCRMStore(id_factory=id_factory, clock=clock)


@pytest.fixture
def demo_store(clock: FakeClock, id_factory: Callable[[], str]) -> InMemoryCRMStore:
    return build_demo_store(id_factory=id_factory, clock=clock)


@pytest.fixture
def service(store: InMemoryCRMStore) -> CRMService:
    return CRMService(store)


@pytest.fixture
def demo_service(demo_store: InMemoryCRMStore) -> CRMService:
    return CRMService(demo_store)


@pytest.fixture
def app(store: InMemoryCRMStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def demo_app(demo_store: InMemoryCRMStore) -> FastAPI:
    return create_app(store=demo_store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def demo_client(demo_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=demo_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
