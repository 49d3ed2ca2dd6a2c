from typing import Dict, List, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.exceptions import ConfigError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    API_URL: str
    API_KEY: str
    PROJECT_NAME: str = "Lista de Alunos"
    PAGE_SIZE: int = 5
    PAGE_SIZE_OPTIONS: List[int] = [5, 10, 100]
    REQUEST_TIMEOUT: Optional[float] = None
    # sessionStorage dos navegadores costuma limitar em ~5MB por origem
    SESSION_QUOTA_BYTES: Optional[int] = 5 * 1024 * 1024
    LOG_LEVEL: str = "INFO"

    @property
    def page_config(self) -> dict:
        return {
            "page_title": self.PROJECT_NAME,
            "layout": "wide"
        }

    @property
    def hide_streamlit_style(self) -> str:
        return """
        <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        header {visibility: hidden;}
        </style>
        """

    @property
    def api_headers(self) -> Dict[str, str]:
        return {"x-api-key": self.API_KEY}

    @property
    def base_url(self) -> str:
        return self.API_URL.rstrip("/")


def load_settings(**overrides) -> Settings:
    """Lê as configurações do ambiente / .env, convertendo erros em ConfigError."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigError(
            f"Configuração inválida ou ausente: {', '.join(missing)}",
            config_key=missing[0] if missing else None
        ) from e
