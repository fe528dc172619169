"""
Tests for settings loading and validation.
"""
import pytest
from pydantic import ValidationError

from bol_worker.config import AppSettings, CarrierSettings, ServiceSettings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no P4W/RL variables set."""
    monkeypatch.chdir(tmp_path)
    for name in [
        "P4W_BASE_URL", "P4W_API_KEY", "P4W_MAX_RECORDS_PER_CHECK",
        "P4W_CHECK_INTERVAL_SECONDS", "P4W_RECORD_DELAY_MS", "P4W_CARRIER_NAME",
        "P4W_PICK_TICKET_STATES", "P4W_TIMEOUT_SECONDS",
        "RL_BASE_URL", "RL_API_KEY", "RL_ENDPOINT", "RL_TIMEOUT_SECONDS",
        "APP_NAME", "LOG_LEVEL", "LOG_FORMAT",
    ]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestServiceSettings:

    def test_defaults(self, clean_env):
        settings = ServiceSettings()
        assert settings.max_records_per_check == 100
        assert settings.check_interval_seconds == 30
        assert settings.record_delay_ms == 100
        assert settings.carrier_name == "R&L CARRIERS"
        assert settings.pick_ticket_states == ["ReadyToPick", "Waved"]

    def test_loads_from_environment(self, clean_env):
        clean_env.setenv("P4W_BASE_URL", "https://p4w.example.com/")
        clean_env.setenv("P4W_API_KEY", "secret")
        clean_env.setenv("P4W_MAX_RECORDS_PER_CHECK", "25")
        clean_env.setenv("P4W_CHECK_INTERVAL_SECONDS", "5")
        clean_env.setenv("P4W_PICK_TICKET_STATES", '["Waved"]')

        settings = ServiceSettings()

        assert settings.base_url == "https://p4w.example.com/"
        assert settings.api_key == "secret"
        assert settings.max_records_per_check == 25
        assert settings.check_interval_seconds == 5
        assert settings.pick_ticket_states == ["Waved"]

    def test_loads_from_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("P4W_API_KEY=from-file\nRL_ENDPOINT=/v2/BillOfLading\n")

        assert ServiceSettings().api_key == "from-file"
        assert CarrierSettings().endpoint == "/v2/BillOfLading"

    def test_record_delay_seconds(self, clean_env):
        settings = ServiceSettings(P4W_RECORD_DELAY_MS=250)
        assert settings.record_delay_seconds == 0.25

    def test_settings_are_immutable(self, clean_env):
        settings = ServiceSettings()
        with pytest.raises(ValidationError):
            settings.max_records_per_check = 5

    @pytest.mark.parametrize("field,value", [
        ("P4W_MAX_RECORDS_PER_CHECK", 0),
        ("P4W_CHECK_INTERVAL_SECONDS", 0),
        ("P4W_RECORD_DELAY_MS", -1),
        ("P4W_PICK_TICKET_STATES", []),
    ])
    def test_rejects_invalid_values(self, clean_env, field, value):
        with pytest.raises(ValidationError):
            ServiceSettings(**{field: value})


class TestCarrierSettings:

    def test_defaults(self, clean_env):
        settings = CarrierSettings()
        assert settings.endpoint == "/BillOfLading"
        assert settings.timeout_seconds == 30.0

    def test_settings_are_immutable(self, clean_env):
        settings = CarrierSettings()
        with pytest.raises(ValidationError):
            settings.api_key = "other"


class TestAppSettings:

    def test_defaults(self, clean_env):
        settings = AppSettings()
        assert settings.app_name == "RandL-BOL-Integration"
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
