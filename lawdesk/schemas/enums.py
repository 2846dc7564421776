from enum import Enum


class UserRole(str, Enum):
    admin = "admin"
    lawyer = "advogado"
    financial = "financeiro"
    secretary = "secretaria"
    intern = "estagiario"


class LeadStatus(str, Enum):
    new = "novo"
    in_contact = "em_contato"
    proposal_sent = "proposta_enviada"
    negotiation = "negociacao"
    converted = "convertido"
    lost = "perdido"


class LegalArea(str, Enum):
    banking = "direito_bancario"
    corporate = "direito_empresarial"
    civil = "direito_civil"
    criminal = "direito_criminal"
    administrative = "direito_administrativo"
    consumer = "direito_consumidor"
    other = "outros"


class LeadOrigin(str, Enum):
    website = "site"
    referral = "indicacao"
    instagram = "instagram"
    tiktok = "tiktok"
    facebook = "facebook"
    google = "google"
    other = "outros"


class TaskPriority(str, Enum):
    low = "baixa"
    medium = "media"
    high = "alta"
    urgent = "urgente"


class TransactionType(str, Enum):
    revenue = "receita"
    expense = "despesa"


class DocumentType(str, Enum):
    contract = "contrato"
    power_of_attorney = "procuracao"
    legal_opinion = "parecer"
    petition = "peticao"
    appeal = "recurso"
    official_letter = "oficio"
    other = "outros"


class CaseStatus(str, Enum):
    active = "ativo"
    awaiting_documents = "aguardando_documentos"
    awaiting_decision = "aguardando_decisao"
    on_appeal = "em_recurso"
    archived = "arquivado"
    won = "ganho"
    lost = "perdido"
