import logging
import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


class TestUsers:
    async def test_create_user(self, admin_client: AsyncClient, lawyer_data: dict, storage):
        response = await admin_client.post("/api/users", json=lawyer_data)
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["username"] == lawyer_data["username"]
        assert data["role"] == "advogado"
        assert "id" in data
        assert "createdAt" in data
        assert "password" not in data
        assert "hashedPassword" not in data

        stored = storage.get_user(data["id"])
        assert stored.hashed_password != lawyer_data["password"]

    async def test_duplicate_username(self, admin_client: AsyncClient, lawyer_data: dict):
        await admin_client.post("/api/users", json=lawyer_data)
        response = await admin_client.post("/api/users", json=lawyer_data)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Username already exists"

    async def test_invalid_role(self, admin_client: AsyncClient, lawyer_data: dict):
        response = await admin_client.post("/api/users", json={**lawyer_data, "role": "judge"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Validation error"

    async def test_list_users(self, admin_client: AsyncClient, lawyer_data: dict):
        await admin_client.post("/api/users", json=lawyer_data)
        response = await admin_client.get("/api/users")
        assert response.status_code == status.HTTP_200_OK
        usernames = [user["username"] for user in response.json()]
        assert usernames == ["admin", "ana"]

    async def test_update_user_password(self, admin_client: AsyncClient, client: AsyncClient, lawyer_data: dict):
        created = (await admin_client.post("/api/users", json=lawyer_data)).json()

        response = await admin_client.put(
            f"/api/users/{created['id']}",
            json={"password": "new-password", "name": "Ana S."}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Ana S."

        old_login = await client.post(
            "/api/auth/login", json={"username": "ana", "password": lawyer_data["password"]}
        )
        assert old_login.status_code == status.HTTP_401_UNAUTHORIZED
        new_login = await client.post(
            "/api/auth/login", json={"username": "ana", "password": "new-password"}
        )
        assert new_login.status_code == status.HTTP_200_OK

    async def test_update_to_taken_username(self, admin_client: AsyncClient, lawyer_data: dict):
        created = (await admin_client.post("/api/users", json=lawyer_data)).json()
        response = await admin_client.patch(f"/api/users/{created['id']}", json={"username": "admin"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_update_missing_user(self, admin_client: AsyncClient):
        response = await admin_client.put("/api/users/999", json={"name": "Ghost"})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_delete_user(self, admin_client: AsyncClient, lawyer_data: dict):
        created = (await admin_client.post("/api/users", json=lawyer_data)).json()

        response = await admin_client.delete(f"/api/users/{created['id']}")
        assert response.status_code == status.HTTP_200_OK

        response = await admin_client.delete(f"/api/users/{created['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_cannot_delete_self(self, admin_client: AsyncClient):
        me = (await admin_client.get("/api/auth/me")).json()
        response = await admin_client.delete(f"/api/users/{me['id']}")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_deleted_user_loses_session(self, admin_client: AsyncClient, lawyer_client: AsyncClient):
        response = await admin_client.delete(f"/api/users/{lawyer_client.user_id}")
        assert response.status_code == status.HTTP_200_OK

        response = await lawyer_client.get("/api/auth/me")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_non_admin_is_forbidden(self, lawyer_client: AsyncClient):
        response = await lawyer_client.get("/api/users")
        assert response.status_code == status.HTTP_403_FORBIDDEN

        response = await lawyer_client.delete("/api/users/1")
        assert response.status_code == status.HTTP_403_FORBIDDEN

    async def test_non_integer_id(self, admin_client: AsyncClient):
        response = await admin_client.get("/api/users/abc")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_refused_admin_access_is_logged(self, lawyer_client: AsyncClient, caplog):
        with caplog.at_level(logging.WARNING, logger="lawdesk"):
            response = await lawyer_client.get("/api/users")
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert any(
            record.name == "lawdesk" and record.getMessage().startswith("Authorization:")
            for record in caplog.records
        )
