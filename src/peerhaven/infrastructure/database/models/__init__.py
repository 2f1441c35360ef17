"""Database ORM models."""

from peerhaven.infrastructure.database.models.contact_model import EmergencyContactModel
from peerhaven.infrastructure.database.models.helper_model import HelperModel
from peerhaven.infrastructure.database.models.knowledge_model import KnowledgeModel

__all__ = [
    "EmergencyContactModel",
    "HelperModel",
    "KnowledgeModel",
]
