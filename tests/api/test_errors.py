import pytest
from httpx import ASGITransport, AsyncClient
from fastapi import status
from asgi_lifespan import LifespanManager

from lawdesk.storage import MemoryStorage
from main import create_app
from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME

pytestmark = pytest.mark.asyncio


class BrokenLeadStorage(MemoryStorage):
    def list_leads(self):
        raise RuntimeError("secret connection string")


class TestErrorResponses:
    async def test_unexpected_error_returns_generic_500(self, test_settings):
        """Unexpected failures are reported without leaking their details."""
        app = create_app(settings=test_settings, storage=BrokenLeadStorage())
        async with LifespanManager(app):
            transport = ASGITransport(app=app, raise_app_exceptions=False)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.post(
                    "/api/auth/login",
                    json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
                )
                assert response.status_code == status.HTTP_200_OK

                response = await client.get("/api/leads")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Internal server error"}
        assert "secret" not in response.text

    async def test_validation_error_shape(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/clients", json={"name": "João"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["detail"] == "Validation error"
        assert body["errors"][0]["field"] == "phone"
        assert set(body["errors"][0]) == {"field", "message", "type"}
