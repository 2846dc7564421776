from fastapi import APIRouter

from lawdesk.api.endpoints import (
    auth,
    backups,
    cases,
    clients,
    documents,
    health,
    leads,
    quick_actions,
    reports,
    tasks,
    transactions,
    users,
)

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(leads.router, prefix="/leads", tags=["leads"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(cases.router, prefix="/cases", tags=["cases"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(quick_actions.router, prefix="/quick-actions", tags=["quick-actions"])
api_router.include_router(backups.router, prefix="/backups", tags=["backups"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
