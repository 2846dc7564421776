from lawdesk.schemas.base import Message
from lawdesk.schemas.enums import (
    UserRole, LeadStatus, LegalArea, LeadOrigin, TaskPriority,
    TransactionType, DocumentType, CaseStatus
)
from lawdesk.schemas.user import User, UserCreate, UserUpdate, UserInDB, UserSummary
from lawdesk.schemas.auth import LoginRequest
from lawdesk.schemas.lead import Lead, LeadCreate, LeadUpdate
from lawdesk.schemas.client import Client, ClientCreate, ClientUpdate
from lawdesk.schemas.contact import ContactHistory, ContactHistoryCreate
from lawdesk.schemas.case import Case, CaseCreate, CaseUpdate
from lawdesk.schemas.task import Task, TaskCreate, TaskUpdate
from lawdesk.schemas.transaction import Transaction, TransactionCreate, TransactionUpdate
from lawdesk.schemas.document import Document, DocumentCreate, DocumentUpdate
from lawdesk.schemas.quick_action import (
    QuickAction, QuickActionCreate, QuickActionUpdate,
    QuickActionRenderRequest, QuickActionRenderResponse
)
from lawdesk.schemas.backup import Backup, BackupCreate
from lawdesk.schemas.report import FinancialReport, LeadReport, TaskReport, CaseReport

# Export all schemas
__all__ = [
    'Message',
    'UserRole', 'LeadStatus', 'LegalArea', 'LeadOrigin', 'TaskPriority',
    'TransactionType', 'DocumentType', 'CaseStatus',
    'User', 'UserCreate', 'UserUpdate', 'UserInDB', 'UserSummary',
    'LoginRequest',
    'Lead', 'LeadCreate', 'LeadUpdate',
    'Client', 'ClientCreate', 'ClientUpdate',
    'ContactHistory', 'ContactHistoryCreate',
    'Case', 'CaseCreate', 'CaseUpdate',
    'Task', 'TaskCreate', 'TaskUpdate',
    'Transaction', 'TransactionCreate', 'TransactionUpdate',
    'Document', 'DocumentCreate', 'DocumentUpdate',
    'QuickAction', 'QuickActionCreate', 'QuickActionUpdate',
    'QuickActionRenderRequest', 'QuickActionRenderResponse',
    'Backup', 'BackupCreate',
    'FinancialReport', 'LeadReport', 'TaskReport', 'CaseReport',
]
