from promotion_ai import __version__
from promotion_ai.exceptions import ProviderError
from promotion_ai.router import ProviderRouter
from tests.conftest import ScriptedProvider


class TestLiveness:
    def test_root_returns_200(self, api_client):
        response = api_client.get("/")
        assert response.status_code == 200

    def test_root_returns_plain_text(self, api_client):
        response = api_client.get("/")
        assert response.headers["content-type"].startswith("text/plain")
        assert "running" in response.text


class TestHealthEndpoint:
    def test_health_returns_healthy_status(self, api_client):
        data = api_client.get("/health").json()
        assert data == {"status": "healthy", "version": __version__}


class TestStatusEndpoint:
    def test_status_reports_each_provider(self, api_client):
        up = ScriptedProvider("openrouter")
        down = ScriptedProvider("groq")
        down.probe_response = ProviderError("groq", "HTTP 503: unavailable")
        api_client.use_router(ProviderRouter([up, down, ScriptedProvider("openai", credential="")]))

        response = api_client.get("/api/status")

        assert response.status_code == 200
        assert response.json() == {
            "openrouter": {"reachable": True, "detail": "ok"},
            "groq": {"reachable": False, "detail": "HTTP 503: unavailable"},
            "openai": {"reachable": False, "detail": "missing credential"},
        }

    def test_status_with_no_providers(self, api_client):
        response = api_client.get("/api/status")
        assert response.status_code == 200
        assert response.json() == {}
