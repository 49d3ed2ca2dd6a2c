import json
from unittest.mock import MagicMock

import pytest
import requests

from galeria.config import Settings
from galeria.data import StudentApiClient
from galeria.utils.exceptions import NetworkFailure


def _response(status_code=200, body=None, raw=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://api.test/x"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return response


def _client(response=None, side_effect=None, timeout=None):
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    client = StudentApiClient("http://api.test/", {"x-api-key": "segredo"}, timeout=timeout, session=session)
    return client, session


class TestStudentApiClient:

    def test_attaches_api_key_header(self):
        client, session = _client(_response(body=[]))
        assert session.headers["x-api-key"] == "segredo"

    def test_get_students(self):
        alunos = [{"id": 1, "name_estudante": "Maria"}]
        client, session = _client(_response(body=alunos))

        assert client.get_students() == alunos
        session.get.assert_called_once_with("http://api.test/estudantes", timeout=None)

    def test_get_students_passes_configured_timeout(self):
        client, session = _client(_response(body=[]), timeout=3.5)
        client.get_students()
        session.get.assert_called_once_with("http://api.test/estudantes", timeout=3.5)

    def test_get_students_rejects_non_list_payload(self):
        client, _ = _client(_response(body={"erro": "x"}))
        with pytest.raises(NetworkFailure):
            client.get_students()

    def test_get_evaluation(self):
        avaliacao = {"nota": 8, "professor": "Ana", "materia": "Física", "sala": "3B"}
        client, session = _client(_response(body=avaliacao))

        assert client.get_evaluation(42) == avaliacao
        session.get.assert_called_once_with("http://api.test/avaliacao/42", timeout=None)

    def test_get_evaluation_quotes_the_id(self):
        client, session = _client(_response(body={"nota": 1}))
        client.get_evaluation("a/b")
        session.get.assert_called_once_with("http://api.test/avaliacao/a%2Fb", timeout=None)

    @pytest.mark.parametrize("raw", [b"", b"null", b"{}", b"  "])
    def test_empty_evaluation_is_not_found(self, raw):
        client, _ = _client(_response(raw=raw))
        assert client.get_evaluation(1) is None

    def test_http_error_becomes_network_failure(self):
        client, _ = _client(_response(status_code=404, body={"detail": "not found"}))

        with pytest.raises(NetworkFailure) as exc_info:
            client.get_evaluation(7)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "http://api.test/avaliacao/7"

    def test_transport_error_becomes_network_failure(self):
        client, _ = _client(side_effect=requests.ConnectionError("recusada"))

        with pytest.raises(NetworkFailure) as exc_info:
            client.get_students()

        assert exc_info.value.status_code is None
        assert exc_info.value.error_code == "NETWORK_FAILURE"

    def test_invalid_json_becomes_network_failure(self):
        client, _ = _client(_response(raw=b"<html>erro</html>"))
        with pytest.raises(NetworkFailure):
            client.get_students()

    def test_from_settings(self):
        settings = Settings(API_URL="http://api.test/", API_KEY="chave", REQUEST_TIMEOUT=2)
        client = StudentApiClient.from_settings(settings)

        assert client.base_url == "http://api.test"
        assert client.timeout == 2
        assert client.session.headers["x-api-key"] == "chave"
        assert client.session.headers["x-api-key"] == settings.api_headers["x-api-key"]
