import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


@pytest.fixture
def expense_data() -> dict:
    return {
        "type": "despesa",
        "description": "Custas processuais",
        "amount": "230.50",
        "date": "2024-02-10T12:00:00Z",
    }


class TestTransactions:
    async def test_create_transaction(self, admin_client: AsyncClient, expense_data: dict):
        me = (await admin_client.get("/api/auth/me")).json()
        response = await admin_client.post("/api/transactions", json=expense_data)
        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["type"] == "despesa"
        assert data["amount"] == "230.50"
        assert data["paid"] is False
        assert data["dueDate"] is None
        assert data["createdById"] == me["id"]
        assert "updatedAt" not in data

    async def test_amount_and_date_are_required(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/transactions", json={
            "type": "receita", "description": "Honorários",
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"amount", "date"} <= fields

    async def test_mark_as_paid(self, admin_client: AsyncClient, expense_data: dict):
        transaction = (await admin_client.post("/api/transactions", json=expense_data)).json()
        response = await admin_client.patch(f"/api/transactions/{transaction['id']}", json={"paid": True})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["paid"] is True
        assert response.json()["amount"] == "230.50"

    async def test_amount_cannot_be_nulled(self, admin_client: AsyncClient, expense_data: dict):
        transaction = (await admin_client.post("/api/transactions", json=expense_data)).json()
        response = await admin_client.put(f"/api/transactions/{transaction['id']}", json={"amount": None})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_read_and_delete(self, admin_client: AsyncClient, expense_data: dict):
        transaction = (await admin_client.post("/api/transactions", json=expense_data)).json()

        response = await admin_client.get(f"/api/transactions/{transaction['id']}")
        assert response.json() == transaction

        response = await admin_client.delete(f"/api/transactions/{transaction['id']}")
        assert response.json() == {"message": "Transaction deleted successfully"}

        response = await admin_client.get(f"/api/transactions/{transaction['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    async def test_amounts_are_normalized_to_cents(self, admin_client: AsyncClient, expense_data: dict):
        response = await admin_client.post("/api/transactions", json={**expense_data, "amount": 1500})
        assert response.status_code == status.HTTP_201_CREATED
        transaction = response.json()
        assert transaction["amount"] == "1500.00"

        response = await admin_client.patch(
            f"/api/transactions/{transaction['id']}", json={"amount": "99.5"}
        )
        assert response.json()["amount"] == "99.50"

    async def test_amount_with_more_than_two_decimals_is_rejected(
        self, admin_client: AsyncClient, expense_data: dict
    ):
        response = await admin_client.post("/api/transactions", json={**expense_data, "amount": "10.005"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
