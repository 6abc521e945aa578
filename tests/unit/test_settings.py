import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert Settings().app_env == "dev"

    def test_default_target_language(self) -> None:
        assert Settings().target_language == "Chinese"

    def test_default_signed_url_ttl(self) -> None:
        assert Settings().signed_url_ttl_seconds == 300

    def test_default_models(self) -> None:
        s = Settings()
        assert s.llm_text_model_name == "gpt-3.5-turbo"
        assert s.llm_vision_model_name == "gpt-4o"
        assert s.llm_vision_max_tokens == 300
        assert s.llm_temperature == 0.2

    def test_default_persistence(self) -> None:
        s = Settings()
        assert s.persistence_backend == "postgres"
        assert s.dynamodb_table_name == "UserDocumentSummaries"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_target_language(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TARGET_LANGUAGE", "Spanish")
        assert Settings().target_language == "Spanish"

    def test_loads_graphql_endpoint(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRAPHQL_ENDPOINT", "https://api.example.com/graphql")
        assert Settings().graphql_endpoint == "https://api.example.com/graphql"


class TestSettingsValidation:
    def test_invalid_ttl_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIGNED_URL_TTL_SECONDS", "five minutes")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_temperature_above_range_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TEMPERATURE", "0.7")
        with pytest.raises(ValidationError):
            Settings()

    def test_negative_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TEMPERATURE", "-0.1")
        with pytest.raises(ValidationError):
            Settings()

    def test_temperature_at_upper_bound_accepted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_TEMPERATURE", "0.2")
        assert Settings().llm_temperature == 0.2
