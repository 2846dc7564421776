import pytest
from httpx import AsyncClient
from fastapi import status

pytestmark = pytest.mark.asyncio


class TestReports:
    async def test_empty_reports(self, admin_client: AsyncClient):
        financial = (await admin_client.get("/api/reports/financial")).json()
        assert financial["balance"] == "0.00"
        assert financial["transactionCount"] == 0

        leads = (await admin_client.get("/api/reports/leads")).json()
        assert leads["total"] == 0
        assert leads["conversionRate"] == 0.0

    async def test_financial_report(self, admin_client: AsyncClient, client_data: dict):
        client = (await admin_client.post("/api/clients", json=client_data)).json()
        await admin_client.post("/api/cases", json={
            "title": "Caso", "clientId": client["id"], "legalArea": "direito_civil", "value": "1000.00",
        })
        await admin_client.post("/api/transactions", json={
            "type": "despesa", "description": "Custas", "amount": "150.25",
            "date": "2024-02-10T12:00:00Z", "paid": True,
        })

        response = await admin_client.get("/api/reports/financial")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["totalRevenue"] == "1000.00"
        assert data["totalExpenses"] == "150.25"
        assert data["balance"] == "849.75"
        assert data["pendingRevenue"] == "1000.00"
        assert data["paidRevenue"] == "0.00"
        assert data["pendingExpenses"] == "0.00"
        assert data["transactionCount"] == 2

    async def test_lead_report(self, admin_client: AsyncClient, lead_data: dict):
        first = (await admin_client.post("/api/leads", json=lead_data)).json()
        await admin_client.post("/api/leads", json={**lead_data, "origin": "instagram"})
        await admin_client.post(f"/api/leads/{first['id']}/convert")

        data = (await admin_client.get("/api/reports/leads")).json()
        assert data["total"] == 2
        assert data["byStatus"] == {"convertido": 1, "novo": 1}
        assert data["byOrigin"] == {"site": 1, "instagram": 1}
        assert data["byLegalArea"] == {"direito_civil": 2}
        assert data["conversionRate"] == 0.5

    async def test_task_report(self, admin_client: AsyncClient):
        await admin_client.post("/api/tasks", json={
            "title": "Atrasada", "priority": "urgente", "deadline": "2000-01-01T00:00:00Z",
        })
        await admin_client.post("/api/tasks", json={
            "title": "Feita", "priority": "alta", "deadline": "2000-01-01T00:00:00Z", "completed": True,
        })
        await admin_client.post("/api/tasks", json={"title": "Normal"})

        data = (await admin_client.get("/api/reports/tasks")).json()
        assert data["total"] == 3
        assert data["completed"] == 1
        assert data["pending"] == 2
        assert data["highPriority"] == 2
        assert data["overdue"] == 1
        assert data["byPriority"] == {"urgente": 1, "alta": 1, "media": 1}

    async def test_case_report(self, admin_client: AsyncClient, client_data: dict):
        client = (await admin_client.post("/api/clients", json=client_data)).json()
        me = (await admin_client.get("/api/auth/me")).json()
        await admin_client.post("/api/cases", json={
            "title": "A", "clientId": client["id"], "legalArea": "direito_civil",
            "value": "500.00", "assignedToId": me["id"],
        })
        await admin_client.post("/api/cases", json={
            "title": "B", "clientId": client["id"], "legalArea": "direito_criminal", "status": "ganho",
        })

        data = (await admin_client.get("/api/reports/cases")).json()
        assert data["total"] == 2
        assert data["byStatus"] == {"ativo": 1, "ganho": 1}
        assert data["byLegalArea"] == {"direito_civil": 1, "direito_criminal": 1}
        assert data["byAssignee"] == {str(me["id"]): 1}
        assert data["totalValue"] == "500.00"

    async def test_reports_available_to_any_user(self, lawyer_client: AsyncClient):
        response = await lawyer_client.get("/api/reports/cases")
        assert response.status_code == status.HTTP_200_OK
