"""
In-memory storage backend.

Each entity type lives in its own table: a dict keyed by an integer id
handed out from a per-table counter. Ids are never reused, not even after
a delete or a rolled-back unit of work. Records are pydantic models that
are replaced, not mutated, on update, so a shallow copy of a table is a
complete snapshot of it.

State is process-local: two instances of the service never share data.
"""

import logging
import random
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from lawdesk.schemas.base import PatchSchema, utcnow
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
from lawdesk.storage.base import Changes, Storage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

BACKUP_MIN_SIZE = 1024 * 1024
BACKUP_MAX_SIZE = 5 * 1024 * 1024

IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


class Table(Generic[RecordT]):
    def __init__(self, model: Type[RecordT], touch_on_update: bool = True):
        self.model = model
        self.touch_on_update = touch_on_update
        self.rows: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self.rows)

    def insert(self, **values: Any) -> RecordT:
        record_id = self._next_id
        self._next_id += 1
        now = utcnow()
        values["created_at"] = now
        if "updated_at" in self.model.model_fields:
            values["updated_at"] = now
        record = self.model(id=record_id, **values)
        self.rows[record_id] = record
        return record

    def get(self, record_id: int) -> Optional[RecordT]:
        return self.rows.get(record_id)

    def all(self) -> List[RecordT]:
        return list(self.rows.values())

    def filter_by(self, **criteria: Any) -> List[RecordT]:
        return [
            record for record in self.rows.values()
            if all(getattr(record, field) == value for field, value in criteria.items())
        ]

    def update(self, record_id: int, changes: Union[PatchSchema, Changes]) -> Optional[RecordT]:
        record = self.rows.get(record_id)
        if record is None:
            return None

        if isinstance(changes, PatchSchema):
            update_data = changes.changes()
        else:
            update_data = dict(changes)

        unknown = set(update_data) - set(self.model.model_fields)
        if unknown or IMMUTABLE_FIELDS & set(update_data):
            raise ValueError(
                f"Cannot update fields {sorted(unknown | (IMMUTABLE_FIELDS & set(update_data)))} "
                f"on {self.model.__name__}"
            )

        if self.touch_on_update and "updated_at" in self.model.model_fields:
            update_data["updated_at"] = utcnow()

        updated = record.model_copy(update=update_data)
        self.rows[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None


class MemoryStorage(Storage):
    kind = "memory"

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self.users: Table[UserInDB] = Table(UserInDB)
        self.leads: Table[Lead] = Table(Lead)
        self.clients: Table[Client] = Table(Client)
        self.contact_history: Table[ContactHistory] = Table(ContactHistory)
        self.cases: Table[Case] = Table(Case)
        self.tasks: Table[Task] = Table(Task)
        self.transactions: Table[Transaction] = Table(Transaction)
        self.documents: Table[Document] = Table(Document)
        self.quick_actions: Table[QuickAction] = Table(QuickAction)
        self.backups: Table[Backup] = Table(Backup)

    def _tables(self) -> Dict[str, Table]:
        return {name: value for name, value in vars(self).items() if isinstance(value, Table)}

    @contextmanager
    def transaction(self) -> Iterator["MemoryStorage"]:
        snapshot = {name: dict(table.rows) for name, table in self._tables().items()}
        try:
            yield self
        except BaseException:
            for name, rows in snapshot.items():
                getattr(self, name).rows = rows
            logger.warning("Unit of work rolled back")
            raise

    # Users
    def get_user(self, user_id: int) -> Optional[UserInDB]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserInDB]:
        return next((user for user in self.users.all() if user.username == username), None)

    def create_user(self, user_in: UserBase, hashed_password: str) -> UserInDB:
        data = user_in.model_dump(exclude={"password"})
        return self.users.insert(**data, hashed_password=hashed_password)

    def list_users(self) -> List[UserInDB]:
        return self.users.all()

    def update_user(self, user_id: int, user_in: Union[UserUpdate, Changes]) -> Optional[UserInDB]:
        return self.users.update(user_id, user_in)

    def delete_user(self, user_id: int) -> bool:
        return self.users.delete(user_id)

    # Leads
    def get_lead(self, lead_id: int) -> Optional[Lead]:
        return self.leads.get(lead_id)

    def create_lead(self, lead_in: LeadCreate) -> Lead:
        return self.leads.insert(**lead_in.model_dump())

    def list_leads(self) -> List[Lead]:
        return self.leads.all()

    def update_lead(self, lead_id: int, lead_in: Union[LeadUpdate, Changes]) -> Optional[Lead]:
        return self.leads.update(lead_id, lead_in)

    def delete_lead(self, lead_id: int) -> bool:
        return self.leads.delete(lead_id)

    # Clients
    def get_client(self, client_id: int) -> Optional[Client]:
        return self.clients.get(client_id)

    def create_client(
        self, client_in: ClientCreate, converted_from_lead_id: Optional[int] = None
    ) -> Client:
        return self.clients.insert(**client_in.model_dump(), converted_from_lead_id=converted_from_lead_id)

    def list_clients(self) -> List[Client]:
        return self.clients.all()

    def update_client(self, client_id: int, client_in: Union[ClientUpdate, Changes]) -> Optional[Client]:
        return self.clients.update(client_id, client_in)

    def delete_client(self, client_id: int) -> bool:
        return self.clients.delete(client_id)

    # Contact history
    def create_contact_history(
        self,
        entry_in: ContactHistoryCreate,
        *,
        created_by_id: int,
        lead_id: Optional[int] = None,
        client_id: Optional[int] = None,
    ) -> ContactHistory:
        return self.contact_history.insert(
            **entry_in.model_dump(),
            created_by_id=created_by_id,
            lead_id=lead_id,
            client_id=client_id,
        )

    @staticmethod
    def _most_recent_first(entries: List[ContactHistory]) -> List[ContactHistory]:
        return sorted(entries, key=lambda entry: (entry.date, entry.id), reverse=True)

    def list_contact_history_by_lead(self, lead_id: int) -> List[ContactHistory]:
        return self._most_recent_first(self.contact_history.filter_by(lead_id=lead_id))

    def list_contact_history_by_client(self, client_id: int) -> List[ContactHistory]:
        return self._most_recent_first(self.contact_history.filter_by(client_id=client_id))

    # Cases
    def get_case(self, case_id: int) -> Optional[Case]:
        return self.cases.get(case_id)

    def create_case(self, case_in: CaseCreate) -> Case:
        return self.cases.insert(**case_in.model_dump())

    def list_cases(self) -> List[Case]:
        return self.cases.all()

    def list_cases_by_client(self, client_id: int) -> List[Case]:
        return self.cases.filter_by(client_id=client_id)

    def update_case(self, case_id: int, case_in: Union[CaseUpdate, Changes]) -> Optional[Case]:
        return self.cases.update(case_id, case_in)

    def delete_case(self, case_id: int) -> bool:
        return self.cases.delete(case_id)

    # Tasks
    def get_task(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def create_task(self, task_in: TaskCreate, created_by_id: int) -> Task:
        return self.tasks.insert(**task_in.model_dump(), created_by_id=created_by_id)

    def list_tasks(self) -> List[Task]:
        return self.tasks.all()

    def list_tasks_by_assignee(self, user_id: int) -> List[Task]:
        return self.tasks.filter_by(assigned_to_id=user_id)

    def list_tasks_by_client(self, client_id: int) -> List[Task]:
        return self.tasks.filter_by(client_id=client_id)

    def list_tasks_by_case(self, case_id: int) -> List[Task]:
        return self.tasks.filter_by(case_id=case_id)

    def update_task(self, task_id: int, task_in: Union[TaskUpdate, Changes]) -> Optional[Task]:
        return self.tasks.update(task_id, task_in)

    def delete_task(self, task_id: int) -> bool:
        return self.tasks.delete(task_id)

    # Transactions
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        return self.transactions.get(transaction_id)

    def create_transaction(self, transaction_in: TransactionCreate, created_by_id: int) -> Transaction:
        return self.transactions.insert(**transaction_in.model_dump(), created_by_id=created_by_id)

    def list_transactions(self) -> List[Transaction]:
        return self.transactions.all()

    def list_transactions_by_case(self, case_id: int) -> List[Transaction]:
        return self.transactions.filter_by(case_id=case_id)

    def update_transaction(
        self, transaction_id: int, transaction_in: Union[TransactionUpdate, Changes]
    ) -> Optional[Transaction]:
        return self.transactions.update(transaction_id, transaction_in)

    def delete_transaction(self, transaction_id: int) -> bool:
        return self.transactions.delete(transaction_id)

    # Documents
    def get_document(self, document_id: int) -> Optional[Document]:
        return self.documents.get(document_id)

    def create_document(self, document_in: DocumentCreate, uploaded_by_id: int) -> Document:
        return self.documents.insert(**document_in.model_dump(), uploaded_by_id=uploaded_by_id)

    def list_documents(self) -> List[Document]:
        return self.documents.all()

    def list_documents_by_case(self, case_id: int) -> List[Document]:
        return self.documents.filter_by(case_id=case_id)

    def list_documents_by_client(self, client_id: int) -> List[Document]:
        return self.documents.filter_by(client_id=client_id)

    def update_document(
        self, document_id: int, document_in: Union[DocumentUpdate, Changes]
    ) -> Optional[Document]:
        return self.documents.update(document_id, document_in)

    def delete_document(self, document_id: int) -> bool:
        return self.documents.delete(document_id)

    # Quick actions
    def get_quick_action(self, action_id: int) -> Optional[QuickAction]:
        return self.quick_actions.get(action_id)

    def create_quick_action(self, action_in: QuickActionCreate, created_by_id: int) -> QuickAction:
        return self.quick_actions.insert(**action_in.model_dump(), created_by_id=created_by_id)

    def list_quick_actions(self) -> List[QuickAction]:
        return self.quick_actions.all()

    def update_quick_action(
        self, action_id: int, action_in: Union[QuickActionUpdate, Changes]
    ) -> Optional[QuickAction]:
        return self.quick_actions.update(action_id, action_in)

    def delete_quick_action(self, action_id: int) -> bool:
        return self.quick_actions.delete(action_id)

    # Backups
    def create_backup(
        self, backup_in: BackupCreate, *, filename: str, created_by_id: Optional[int] = None
    ) -> Backup:
        # Placeholder size: nothing is actually serialized.
        file_size = self._rng.randint(BACKUP_MIN_SIZE, BACKUP_MAX_SIZE - 1)
        name = backup_in.name or f"Backup {utcnow().strftime('%d/%m/%Y')}"
        return self.backups.insert(
            name=name,
            description=backup_in.description or "",
            filename=filename,
            file_size=file_size,
            created_by_id=created_by_id,
            automatic=backup_in.automatic,
        )

    def list_backups(self) -> List[Backup]:
        return sorted(self.backups.all(), key=lambda backup: (backup.created_at, backup.id), reverse=True)
