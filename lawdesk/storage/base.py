"""
Repository contract.

The storage backend is the sole owner of entity state. Lookups never raise
for missing records: ``get_*`` and ``update_*`` return None and ``delete_*``
returns False, and callers translate that into a 404.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Dict, List, Optional, Union

from lawdesk.schemas.user import UserBase, UserInDB, UserUpdate
from lawdesk.schemas.lead import Lead, LeadCreate, LeadUpdate
from lawdesk.schemas.client import Client, ClientCreate, ClientUpdate
from lawdesk.schemas.contact import ContactHistory, ContactHistoryCreate
from lawdesk.schemas.case import Case, CaseCreate, CaseUpdate
from lawdesk.schemas.task import Task, TaskCreate, TaskUpdate
from lawdesk.schemas.transaction import Transaction, TransactionCreate, TransactionUpdate
from lawdesk.schemas.document import Document, DocumentCreate, DocumentUpdate
from lawdesk.schemas.quick_action import QuickAction, QuickActionCreate, QuickActionUpdate
from lawdesk.schemas.backup import Backup, BackupCreate

Changes = Dict[str, Any]


class Storage(ABC):
    kind: str = "abstract"

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """
        Unit of work. Every write made inside the block is undone if the
        block raises.
        """

    # Users
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserInDB]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserInDB]: ...

    @abstractmethod
    def create_user(self, user_in: UserBase, hashed_password: str) -> UserInDB: ...

    @abstractmethod
    def list_users(self) -> List[UserInDB]: ...

    @abstractmethod
    def update_user(self, user_id: int, user_in: Union[UserUpdate, Changes]) -> Optional[UserInDB]: ...

    @abstractmethod
    def delete_user(self, user_id: int) -> bool: ...

    # Leads
    @abstractmethod
    def get_lead(self, lead_id: int) -> Optional[Lead]: ...

    @abstractmethod
    def create_lead(self, lead_in: LeadCreate) -> Lead: ...

    @abstractmethod
    def list_leads(self) -> List[Lead]: ...

    @abstractmethod
    def update_lead(self, lead_id: int, lead_in: Union[LeadUpdate, Changes]) -> Optional[Lead]: ...

    @abstractmethod
    def delete_lead(self, lead_id: int) -> bool: ...

    # Clients
    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]: ...

    @abstractmethod
    def create_client(
        self, client_in: ClientCreate, converted_from_lead_id: Optional[int] = None
    ) -> Client: ...

    @abstractmethod
    def list_clients(self) -> List[Client]: ...

    @abstractmethod
    def update_client(self, client_id: int, client_in: Union[ClientUpdate, Changes]) -> Optional[Client]: ...

    @abstractmethod
    def delete_client(self, client_id: int) -> bool: ...

    # Contact history (append-only)
    @abstractmethod
    def create_contact_history(
        self,
        entry_in: ContactHistoryCreate,
        *,
        created_by_id: int,
        lead_id: Optional[int] = None,
        client_id: Optional[int] = None,
    ) -> ContactHistory: ...

    @abstractmethod
    def list_contact_history_by_lead(self, lead_id: int) -> List[ContactHistory]:
        """Most recent first."""

    @abstractmethod
    def list_contact_history_by_client(self, client_id: int) -> List[ContactHistory]:
        """Most recent first."""

    # Cases
    @abstractmethod
    def get_case(self, case_id: int) -> Optional[Case]: ...

    @abstractmethod
    def create_case(self, case_in: CaseCreate) -> Case: ...

    @abstractmethod
    def list_cases(self) -> List[Case]: ...

    @abstractmethod
    def list_cases_by_client(self, client_id: int) -> List[Case]: ...

    @abstractmethod
    def update_case(self, case_id: int, case_in: Union[CaseUpdate, Changes]) -> Optional[Case]: ...

    @abstractmethod
    def delete_case(self, case_id: int) -> bool: ...

    # Tasks
    @abstractmethod
    def get_task(self, task_id: int) -> Optional[Task]: ...

    @abstractmethod
    def create_task(self, task_in: TaskCreate, created_by_id: int) -> Task: ...

    @abstractmethod
    def list_tasks(self) -> List[Task]: ...

    @abstractmethod
    def list_tasks_by_assignee(self, user_id: int) -> List[Task]: ...

    @abstractmethod
    def list_tasks_by_client(self, client_id: int) -> List[Task]: ...

    @abstractmethod
    def list_tasks_by_case(self, case_id: int) -> List[Task]: ...

    @abstractmethod
    def update_task(self, task_id: int, task_in: Union[TaskUpdate, Changes]) -> Optional[Task]: ...

    @abstractmethod
    def delete_task(self, task_id: int) -> bool: ...

    # Transactions
    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]: ...

    @abstractmethod
    def create_transaction(self, transaction_in: TransactionCreate, created_by_id: int) -> Transaction: ...

    @abstractmethod
    def list_transactions(self) -> List[Transaction]: ...

    @abstractmethod
    def list_transactions_by_case(self, case_id: int) -> List[Transaction]: ...

    @abstractmethod
    def update_transaction(
        self, transaction_id: int, transaction_in: Union[TransactionUpdate, Changes]
    ) -> Optional[Transaction]: ...

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> bool: ...

    # Documents
    @abstractmethod
    def get_document(self, document_id: int) -> Optional[Document]: ...

    @abstractmethod
    def create_document(self, document_in: DocumentCreate, uploaded_by_id: int) -> Document: ...

    @abstractmethod
    def list_documents(self) -> List[Document]: ...

    @abstractmethod
    def list_documents_by_case(self, case_id: int) -> List[Document]: ...

    @abstractmethod
    def list_documents_by_client(self, client_id: int) -> List[Document]: ...

    @abstractmethod
    def update_document(
        self, document_id: int, document_in: Union[DocumentUpdate, Changes]
    ) -> Optional[Document]: ...

    @abstractmethod
    def delete_document(self, document_id: int) -> bool: ...

    # Quick actions
    @abstractmethod
    def get_quick_action(self, action_id: int) -> Optional[QuickAction]: ...

    @abstractmethod
    def create_quick_action(self, action_in: QuickActionCreate, created_by_id: int) -> QuickAction: ...

    @abstractmethod
    def list_quick_actions(self) -> List[QuickAction]: ...

    @abstractmethod
    def update_quick_action(
        self, action_id: int, action_in: Union[QuickActionUpdate, Changes]
    ) -> Optional[QuickAction]: ...

    @abstractmethod
    def delete_quick_action(self, action_id: int) -> bool: ...

    # Backups (append-only)
    @abstractmethod
    def create_backup(
        self, backup_in: BackupCreate, *, filename: str, created_by_id: Optional[int] = None
    ) -> Backup: ...

    @abstractmethod
    def list_backups(self) -> List[Backup]:
        """Newest first."""
