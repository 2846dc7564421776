import logging
from lawdesk.schemas.client import Client, ClientCreate
from lawdesk.schemas.enums import LeadStatus
from lawdesk.schemas.lead import Lead
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)


class LeadAlreadyConverted(Exception):
    pass


def convert_lead(storage: Storage, lead: Lead) -> Client:
    """
    Turn a lead into a client.

    Creates exactly one client carrying the lead's name, phone and email and
    a back-reference to the lead, then marks the lead as converted. Both
    writes happen in one unit of work.
    """
    if lead.status == LeadStatus.converted:
        raise LeadAlreadyConverted(f"Lead {lead.id} was already converted")

    with storage.transaction():
        client = storage.create_client(
            ClientCreate(
                name=lead.name,
                phone=lead.phone,
                email=lead.email,
                address="",
                document="",
            ),
            converted_from_lead_id=lead.id,
        )
        storage.update_lead(lead.id, {"status": LeadStatus.converted})

    logger.info(f"Lead {lead.id} converted into client {client.id}")
    return client
