import pytest
from fake_engine import FakeEngine

from wininet_client.client import Client
from wininet_client.settings import Settings

SESSION = 1


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine().respond()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def client(engine: FakeEngine, settings: Settings) -> Client:
    return Client(engine, SESSION, settings)
