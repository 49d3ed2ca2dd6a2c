import pytest

from galeria.config import Settings, load_settings
from galeria.utils.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("API_URL", "API_KEY", "PAGE_SIZE", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("API_URL", "http://api.test/")
    monkeypatch.setenv("API_KEY", "chave")

    settings = Settings()

    assert settings.PAGE_SIZE == 5
    assert settings.PAGE_SIZE_OPTIONS == [5, 10, 100]
    assert settings.REQUEST_TIMEOUT is None
    assert settings.base_url == "http://api.test"
    assert settings.api_headers == {"x-api-key": "chave"}
    assert settings.page_config == {"page_title": "Lista de Alunos", "layout": "wide"}


def test_reads_env_file(tmp_path):
    (tmp_path / ".env").write_text("API_URL=http://env.file\nAPI_KEY=abc\nPAGE_SIZE=10\n", encoding="utf-8")

    settings = Settings()

    assert settings.API_URL == "http://env.file"
    assert settings.PAGE_SIZE == 10


def test_missing_required_values_raise_config_error():
    with pytest.raises(ConfigError) as exc_info:
        load_settings()

    assert exc_info.value.error_code == "CONFIG_ERROR"
    assert "API_URL" in exc_info.value.message
