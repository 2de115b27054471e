import pytest

from product_api import config
from product_api.config import ConfigurationError, Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("HOST", "PORT", "APP_ENV", "API_KEY", "LOG_LEVEL", "SEED_SAMPLE_PRODUCTS"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_settings", None)


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()
        assert settings == Settings()
        assert settings.port == 3000
        assert settings.api_key == "your-secret-api-key"
        assert settings.expose_diagnostics is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("APP_ENV", "Development")
        monkeypatch.setenv("API_KEY", "abc")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SEED_SAMPLE_PRODUCTS", "false")
        settings = load_settings()
        assert settings.port == 8080
        assert settings.env == "development"
        assert settings.expose_diagnostics is True
        assert settings.api_key == "abc"
        assert settings.log_level == "DEBUG"
        assert settings.seed_sample_products is False

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("API_KEY=from-dotenv\n")
        assert load_settings().api_key == "from-dotenv"

    @pytest.mark.parametrize("key, value", [
        ("PORT", "eighty"),
        ("LOG_LEVEL", "chatty"),
        ("SEED_SAMPLE_PRODUCTS", "maybe"),
    ])
    def test_invalid_values_fail_fast(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_get_settings_is_cached(self, monkeypatch):
        first = config.get_settings()
        monkeypatch.setenv("PORT", "9999")
        assert config.get_settings() is first
