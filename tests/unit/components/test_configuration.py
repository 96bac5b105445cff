import json

import pytest

from app.components.configuration.configuration import Configuration


@pytest.fixture
def config_dir(tmp_path):
    values = {
        "LOG_LEVEL": "INFO",
        "MAX_IMAGE_BYTES": 2048,
        "LLM_TEMPERATURE": 0.5,
        "FEATURE_FLAG": "yes",
    }
    (tmp_path / "development.json").write_text(json.dumps(values), encoding="utf-8")
    return tmp_path


@pytest.mark.unit
class TestConfiguration:
    def test_reads_values_from_environment_file(self, config_dir, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        configuration = Configuration("development", str(config_dir))

        assert configuration.get_configuration("LOG_LEVEL", str) == "INFO"
        assert configuration.get_configuration("MAX_IMAGE_BYTES", int) == 2048
        assert configuration.get_configuration("LLM_TEMPERATURE", float) == 0.5

    def test_environment_variable_overrides_file(self, config_dir, monkeypatch):
        monkeypatch.setenv("MAX_IMAGE_BYTES", "4096")
        configuration = Configuration("development", str(config_dir))

        assert configuration.get_configuration("MAX_IMAGE_BYTES", int) == 4096

    def test_missing_key_uses_default(self, config_dir):
        configuration = Configuration("development", str(config_dir))

        assert (
            configuration.get_configuration("NOT_THERE_KEY", str, default="fallback")
            == "fallback"
        )

    def test_missing_key_without_default_raises(self, config_dir):
        configuration = Configuration("development", str(config_dir))

        with pytest.raises(ValueError) as exc_info:
            configuration.get_configuration("NOT_THERE_KEY", str)

        assert "NOT_THERE_KEY" in str(exc_info.value)

    def test_missing_file_behaves_as_empty(self, tmp_path):
        configuration = Configuration("staging", str(tmp_path))

        assert configuration.get_configuration("NOT_THERE_KEY", int, default=3) == 3

    def test_boolean_strings_are_parsed(self, config_dir, monkeypatch):
        monkeypatch.delenv("FEATURE_FLAG", raising=False)
        configuration = Configuration("development", str(config_dir))

        assert configuration.get_configuration("FEATURE_FLAG", bool) is True

    def test_invalid_cast_raises(self, config_dir, monkeypatch):
        monkeypatch.setenv("MAX_IMAGE_BYTES", "lots")
        configuration = Configuration("development", str(config_dir))

        with pytest.raises(ValueError):
            configuration.get_configuration("MAX_IMAGE_BYTES", int)
