import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


class TestTasks:
    async def test_create_task_defaults(self, admin_client: AsyncClient):
        me = (await admin_client.get("/api/auth/me")).json()
        response = await admin_client.post("/api/tasks", json={"title": "Revisar contrato"})
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["priority"] == "media"
        assert data["completed"] is False
        assert data["createdById"] == me["id"]

    async def test_created_by_is_not_client_controlled(self, admin_client: AsyncClient):
        me = (await admin_client.get("/api/auth/me")).json()
        response = await admin_client.post("/api/tasks", json={"title": "Tarefa", "createdById": 999})
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["createdById"] == me["id"]

    async def test_create_task_invalid_priority(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/tasks", json={"title": "Tarefa", "priority": "maxima"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_my_tasks(self, admin_client: AsyncClient, lawyer_client: AsyncClient):
        await admin_client.post("/api/tasks", json={
            "title": "Para Ana", "assignedToId": lawyer_client.user_id,
        })
        await admin_client.post("/api/tasks", json={"title": "Sem responsável"})

        response = await lawyer_client.get("/api/tasks/my")
        assert response.status_code == status.HTTP_200_OK
        assert [task["title"] for task in response.json()] == ["Para Ana"]

        response = await admin_client.get("/api/tasks/my")
        assert response.json() == []

        response = await lawyer_client.get("/api/tasks")
        assert len(response.json()) == 2

    async def test_complete_task(self, admin_client: AsyncClient):
        task = (await admin_client.post("/api/tasks", json={"title": "Tarefa"})).json()
        response = await admin_client.patch(f"/api/tasks/{task['id']}", json={"completed": True})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["completed"] is True
        assert response.json()["createdById"] == task["createdById"]

    async def test_update_created_by_is_rejected(self, admin_client: AsyncClient):
        task = (await admin_client.post("/api/tasks", json={"title": "Tarefa"})).json()
        response = await admin_client.patch(f"/api/tasks/{task['id']}", json={"createdById": 5})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_read_missing_task(self, admin_client: AsyncClient):
        response = await admin_client.get("/api/tasks/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_delete_task(self, admin_client: AsyncClient):
        task = (await admin_client.post("/api/tasks", json={"title": "Tarefa"})).json()
        response = await admin_client.delete(f"/api/tasks/{task['id']}")
        assert response.json() == {"message": "Task deleted successfully"}
        response = await admin_client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
