"""
Tests unitaires pour l'API REST.

Teste les endpoints de sante et l'injection du mailer.
"""

import pytest
from fastapi.testclient import TestClient

from src.infrastructure.config.settings import MailerSettings
from src.infrastructure.container import Container
from src.presentation.api.main import create_app


def make_client(transport=None, configured=True) -> TestClient:
    """Construit un client de test avec un Container explicite."""
    if configured:
        settings = MailerSettings(
            _env_file=None,
            email_user="shop@veggie.test",
            email_password="secret",
        )
    else:
        settings = MailerSettings(_env_file=None)

    container = Container.create(settings, transport_factory=lambda _c: transport)
    return TestClient(create_app(container))


class TestHealthEndpoints:
    """Tests pour le router health."""

    def test_health(self, clean_env, fake_transport):
        """GET /health repond toujours."""
        client = make_client(fake_transport)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_email_health_ready(self, clean_env, fake_transport):
        """GET /health/email: 200 si le serveur SMTP repond."""
        client = make_client(fake_transport)

        response = client.get("/health/email")

        assert response.status_code == 200
        assert response.json() == {"email": "ready", "configured": True}
        assert fake_transport.verify_calls == 1

    def test_email_health_unconfigured(self, clean_env):
        """GET /health/email: 503 si le mailer n'est pas configure."""
        client = make_client(configured=False)

        response = client.get("/health/email")

        assert response.status_code == 503
        assert response.json() == {"email": "unavailable", "configured": False}

    def test_email_health_server_down(self, clean_env, transport_cls):
        """GET /health/email: 503 sans crash si le serveur est injoignable."""
        transport = transport_cls(verify_error=ConnectionRefusedError("refused"))
        client = make_client(transport)

        response = client.get("/health/email")

        assert response.status_code == 503
        assert response.json() == {"email": "unavailable", "configured": True}

    @pytest.mark.parametrize("path", ["/health", "/health/email"])
    def test_routes_registered(self, clean_env, fake_transport, path):
        """Les routes sont exposees dans l'OpenAPI."""
        client = make_client(fake_transport)

        assert path in client.get("/openapi.json").json()["paths"]
