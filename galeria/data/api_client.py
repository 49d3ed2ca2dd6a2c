from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from ..utils.exceptions import NetworkFailure
from ..utils.logger import get_logger

logger = get_logger(__name__)


class StudentApiClient:
    def __init__(self, base_url: str, headers: Dict[str, str],
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(headers)

    @classmethod
    def from_settings(cls, settings) -> "StudentApiClient":
        return cls(
            base_url=settings.base_url,
            headers=settings.api_headers,
            timeout=settings.REQUEST_TIMEOUT
        )

    def get_students(self) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/estudantes"
        data = self._get_json(url)
        if not isinstance(data, list):
            raise NetworkFailure(
                f"Resposta inesperada de {url}: esperado lista, recebido {type(data).__name__}",
                url=url
            )
        return data

    def get_evaluation(self, student_id) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/avaliacao/{quote(str(student_id), safe='')}"
        data = self._get_json(url)
        if not data:
            return None
        if not isinstance(data, dict):
            raise NetworkFailure(
                f"Resposta inesperada de {url}: esperado objeto, recebido {type(data).__name__}",
                url=url
            )
        return data

    def _get_json(self, url: str) -> Any:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise NetworkFailure(f"Erro HTTP {status} em {url}", url=url, status_code=status) from e
        except requests.RequestException as e:
            raise NetworkFailure(f"Falha de rede em {url}: {e}", url=url) from e

        if not response.content or not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure(
                f"Corpo inválido em {url}: {e}", url=url, status_code=response.status_code
            ) from e
