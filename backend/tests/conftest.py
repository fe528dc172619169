"""
Shared fixtures for BOL worker tests.
"""
import pytest
import structlog

from bol_worker.config import CarrierSettings, ServiceSettings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() a test triggered."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def service_settings() -> ServiceSettings:
    return ServiceSettings(
        P4W_BASE_URL="https://p4w.test/",
        P4W_API_KEY="p4w-key",
        P4W_MAX_RECORDS_PER_CHECK=50,
        P4W_CHECK_INTERVAL_SECONDS=0.01,
        P4W_RECORD_DELAY_MS=0,
    )


@pytest.fixture
def carrier_settings() -> CarrierSettings:
    return CarrierSettings(
        RL_BASE_URL="https://rl.test/api",
        RL_API_KEY="rl-key",
        RL_ENDPOINT="/BillOfLading",
    )
