import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


@pytest.fixture
def action_data() -> dict:
    return {
        "title": "Boas-vindas",
        "actionType": "whatsapp",
        "templateContent": "Olá {cliente}, sua audiência é em {data}. Processo {processo}.",
    }


class TestQuickActions:
    async def test_crud(self, admin_client: AsyncClient, action_data: dict):
        response = await admin_client.post("/api/quick-actions", json=action_data)
        assert response.status_code == status.HTTP_201_CREATED
        action = response.json()
        assert action["actionType"] == "whatsapp"

        response = await admin_client.put(f"/api/quick-actions/{action['id']}", json={"title": "Saudação"})
        assert response.json()["title"] == "Saudação"
        assert response.json()["templateContent"] == action_data["templateContent"]

        response = await admin_client.delete(f"/api/quick-actions/{action['id']}")
        assert response.json() == {"message": "Quick action deleted successfully"}

        response = await admin_client.get(f"/api/quick-actions/{action['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_render(self, admin_client: AsyncClient, action_data: dict):
        action = (await admin_client.post("/api/quick-actions", json=action_data)).json()

        response = await admin_client.post(
            f"/api/quick-actions/{action['id']}/render",
            json={"values": {"cliente": "Maria", "data": "10/06"}}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"content": "Olá Maria, sua audiência é em 10/06. Processo {processo}."}

    async def test_render_without_template(self, admin_client: AsyncClient):
        action = (await admin_client.post(
            "/api/quick-actions", json={"title": "Vazia", "actionType": "email"}
        )).json()
        response = await admin_client.post(f"/api/quick-actions/{action['id']}/render", json={})
        assert response.json() == {"content": ""}

    async def test_render_missing_action(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/quick-actions/999/render", json={"values": {}})
        assert response.status_code == status.HTTP_404_NOT_FOUND
