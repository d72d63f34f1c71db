# Banca API Test Suite
# ====================
"""Tests for the Banca FastAPI service, with the data source mocked."""

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from banca.api.main import app
from banca.api.dependencies import get_api_client, get_view_service
from banca.client import ApiConnectionError, ApiResponseError, LoginUser
from banca.sheets import EvaluatorViewService


@pytest.fixture
def api_client_mock():
    return MagicMock()


@pytest.fixture
def client(api_client_mock, fake_loader, two_sheet_catalog):
    service = EvaluatorViewService(fake_loader, two_sheet_catalog)
    app.dependency_overrides[get_api_client] = lambda: api_client_mock
    app.dependency_overrides[get_view_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


EVALUATOR = {"id": "u1", "name": "Maria Souza", "categoria": "EM"}


class TestRoot:
    """Root endpoints."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLogin:
    """POST /api/v1/auth/login"""

    def test_login_success(self, client, api_client_mock):
        api_client_mock.login.return_value = LoginUser(id="u1", name="Maria Souza", categoria="EM")

        response = client.post("/api/v1/auth/login", json={"login": "maria", "senha": "x"})

        assert response.status_code == 200
        assert response.json()["data"]["user"]["id"] == "u1"
        api_client_mock.login.assert_called_once_with("maria", "x")

    def test_login_rejected(self, client, api_client_mock):
        api_client_mock.login.side_effect = ApiResponseError("login", "Senha inválida")
        response = client.post("/api/v1/auth/login", json={"login": "maria", "senha": "x"})
        assert response.status_code == 401

    def test_data_source_down(self, client, api_client_mock):
        api_client_mock.login.side_effect = ApiConnectionError("https://example.org/exec")
        response = client.post("/api/v1/auth/login", json={"login": "maria", "senha": "x"})
        assert response.status_code == 502
        assert response.json()["error"]["code"] == "DATA_SOURCE_ERROR"


class TestSheetsView:
    """POST /api/v1/sheets/view"""

    def test_view(self, client):
        response = client.post("/api/v1/sheets/view", json={"evaluator": EVALUATOR})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "ready"
        assert data["selected_sheet"] == "DT"
        assert [s["name"] for s in data["sheets"]] == ["DT"]
        group = data["sheets"][0]["groups"][0]
        assert group["name"] == "Alpha"
        assert group["record"]["AVALIADOR"] == "u1, u2"

    def test_nothing_assigned(self, client):
        response = client.post(
            "/api/v1/sheets/view",
            json={"evaluator": {"id": "zz", "name": "Ninguém"}},
        )
        data = response.json()["data"]
        assert response.status_code == 200
        assert data["status"] == "nothing_assigned"
        assert data["sheets"] == []
        assert data["selected_sheet"] is None
        assert data["message"]

    def test_refresh_failure_returns_previous_view(self, client, fake_loader):
        client.post("/api/v1/sheets/view", json={"evaluator": EVALUATOR})
        fake_loader.rows = {"DT": ApiConnectionError("x"), "PITCH": ApiConnectionError("x")}

        response = client.post("/api/v1/sheets/view", json={"evaluator": EVALUATOR})

        assert response.status_code == 502
        detail = response.json()["detail"]
        assert detail["code"] == "REFRESH_FAILED"
        assert detail["failed_sheets"] == ["Design Thinking", "Pitch"]
        assert detail["previous_view"]["sheets"][0]["name"] == "DT"

    def test_get_retained_view(self, client):
        assert client.get("/api/v1/sheets/view/u1").status_code == 404
        client.post("/api/v1/sheets/view", json={"evaluator": EVALUATOR})
        response = client.get("/api/v1/sheets/view/u1")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "ready"


class TestEvaluations:
    """POST /api/v1/evaluations/{sheet}"""

    def test_save(self, client, api_client_mock):
        api_client_mock.save_notas.return_value = 1
        response = client.post("/api/v1/evaluations/DT", json={
            "evaluator_id": "u1",
            "group": {"GRUPO": "Alpha"},
            "scores": {"NOTA 1": 5, "NOTA 2": 4},
            "feedback": "Bom trabalho",
        })

        assert response.status_code == 200
        assert response.json()["data"]["updated_rows"] == 1
        api_client_mock.save_notas.assert_called_once_with(
            "DT", "u1", "Alpha", {"NOTA 1": "5", "NOTA 2": "4", "FEEDBACK": "Bom trabalho"}
        )

    def test_invalid_scores(self, client, api_client_mock):
        response = client.post("/api/v1/evaluations/DT", json={
            "evaluator_id": "u1",
            "group": {"GRUPO": "Alpha"},
            "scores": {"NOTA 1": 0},
        })
        assert response.status_code == 422
        assert response.json()["detail"]["fields"] == {"NOTA 1": "Nota deve ser entre 1 e 5"}
        api_client_mock.save_notas.assert_not_called()

    def test_rejects_request_field_keys(self, client, api_client_mock):
        response = client.post("/api/v1/evaluations/DT", json={
            "evaluator_id": "u1",
            "group": {"GRUPO": "Alpha"},
            "scores": {"NOTA 1": 5, "evaluatorId": 2, "sheet": 3},
        })
        assert response.status_code == 422
        assert set(response.json()["detail"]["fields"]) == {"evaluatorId", "sheet"}
        api_client_mock.save_notas.assert_not_called()

    def test_rejects_empty_scores(self, client, api_client_mock):
        response = client.post("/api/v1/evaluations/DT", json={
            "evaluator_id": "u1", "group": {"GRUPO": "Alpha"}, "scores": {},
        })
        assert response.status_code == 422
        api_client_mock.save_notas.assert_not_called()

    def test_form_prefills_stored_scores(self, client, api_client_mock):
        from banca.client import Rubrica
        api_client_mock.get_rubricas.return_value = [Rubrica(criterio="Clareza"), Rubrica(criterio="Impacto")]

        response = client.post("/api/v1/evaluations/prototipo/form", json={
            "categoria": "EM",
            "group": {"GRUPO": "Alpha", "NOTA 1": "4.0", "FEEDBACK": "Bom"},
        })

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["sheet"] == "PROTÓTIPO"
        assert data["grupo"] == "Alpha"
        assert data["scores"] == {"NOTA 1": 4, "NOTA 2": 0}
        assert data["feedback"] == "Bom"
        assert [r["criterio"] for r in data["rubricas"]] == ["Clareza", "Impacto"]
        api_client_mock.get_rubricas.assert_called_once_with("EM")

        api_client_mock.save_notas.assert_not_called()

    def test_unknown_sheet(self, client):
        response = client.post("/api/v1/evaluations/OUTRA", json={
            "evaluator_id": "u1", "group": {}, "scores": {"NOTA 1": 3},
        })
        assert response.status_code == 404


class TestEvent:
    """Event details and rubrics passthrough."""

    def test_rubricas(self, client, api_client_mock):
        from banca.client import Rubrica
        api_client_mock.get_rubricas.return_value = [Rubrica(criterio="Clareza")]
        response = client.get("/api/v1/event/rubricas/EM")
        assert response.status_code == 200
        assert response.json()["data"]["rubricas"][0]["criterio"] == "Clareza"

    def test_informacoes(self, client, api_client_mock):
        from banca.client import InformacoesEvento
        api_client_mock.get_informacoes.return_value = InformacoesEvento(id="u1", cliente="Escola X")
        response = client.get("/api/v1/event/informacoes/u1")
        assert response.status_code == 200
        assert response.json()["data"]["cliente"] == "Escola X"
        api_client_mock.get_informacoes.assert_called_once_with("u1")


class TestBlockingRoutes:
    """Routes calling the data source run in the threadpool."""

    def test_data_source_routes_are_sync(self):
        import inspect
        from banca.api.routers import auth, evaluations, event, sheets

        for endpoint in (auth.login, sheets.refresh_view, event.get_informacoes,
                         event.get_rubricas, evaluations.evaluation_form, evaluations.save_evaluation):
            assert not inspect.iscoroutinefunction(endpoint), endpoint.__name__
