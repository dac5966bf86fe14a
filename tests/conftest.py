import pytest

from eventbridge._config import Config
from eventbridge._services import EventsService, SchedulerService
from eventbridge._utils.constants import (
    ENV_DEFAULT_REGION,
    ENV_ENDPOINT_URL,
    ENV_REGION,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's AWS environment out of the tests."""
    for name in (ENV_REGION, ENV_DEFAULT_REGION, ENV_ENDPOINT_URL):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    return Config(region="us-west-2")


@pytest.fixture
def events_service(config: Config) -> EventsService:
    return EventsService(config)


@pytest.fixture
def scheduler_service(config: Config) -> SchedulerService:
    return SchedulerService(config)
