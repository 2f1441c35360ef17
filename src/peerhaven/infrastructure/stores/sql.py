"""
SQL Stores

Store implementations reading the managed marketplace database
through async SQLAlchemy. Database errors surface as
StoreUnavailableError; records that violate domain invariants
are skipped with a warning.
"""

from typing import Any, Callable, Optional, Sequence, TypeVar

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from peerhaven.config.logging_config import get_logger
from peerhaven.domain.enums.support_category import ContactCategory
from peerhaven.domain.errors import StoreUnavailableError
from peerhaven.domain.models.emergency_contact import EmergencyContact
from peerhaven.domain.models.helper import HelperRecord
from peerhaven.domain.models.knowledge import KnowledgeEntry
from peerhaven.infrastructure.database.connection import DatabaseManager
from peerhaven.infrastructure.database.models import (
    EmergencyContactModel,
    HelperModel,
    KnowledgeModel,
)
from peerhaven.infrastructure.stores.base import (
    ContactStore,
    HelperStore,
    KnowledgeStore,
    knowledge_search_order,
    matches_knowledge_term,
)

logger = get_logger(__name__)

T = TypeVar("T")


def _to_domain(
    rows: Sequence[Any],
    parse: Callable[[dict[str, Any]], T],
    table: str,
) -> tuple[T, ...]:
    records = []
    for row in rows:
        try:
            records.append(parse(row.to_record()))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Skipping invalid database record",
                table=table,
                record_id=getattr(row, "id", None),
                error=str(e),
            )
    return tuple(records)


class SqlKnowledgeStore(KnowledgeStore):
    """Knowledge store over the ai_knowledge_base table."""
    
    def __init__(self, db: DatabaseManager) -> None:
        self._db = db
    
    async def list_knowledge(self, category_id: Optional[str] = None) -> Sequence[KnowledgeEntry]:
        query = select(KnowledgeModel).order_by(KnowledgeModel.topic)
        if category_id is not None:
            query = query.where(KnowledgeModel.category_id == category_id)
        try:
            async with self._db.session() as session:
                rows = (await session.execute(query)).scalars().all()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreUnavailableError("knowledge", str(e), original_error=e) from e
        return _to_domain(rows, KnowledgeEntry.from_dict, KnowledgeModel.__tablename__)
    
    async def search(self, term: str) -> Sequence[KnowledgeEntry]:
        needle = term.strip().lower()
        if not needle:
            return ()
        # Coarse SQL prefilter; exact keyword membership is confirmed in Python
        pattern = f"%{needle}%"
        query = select(KnowledgeModel).where(or_(
            func.lower(KnowledgeModel.topic).like(pattern),
            func.lower(KnowledgeModel.content).like(pattern),
            func.lower(cast(KnowledgeModel.keywords, String)).like(f'%"{needle}"%'),
        ))
        try:
            async with self._db.session() as session:
                rows = (await session.execute(query)).scalars().all()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreUnavailableError("knowledge", str(e), original_error=e) from e
        entries = _to_domain(rows, KnowledgeEntry.from_dict, KnowledgeModel.__tablename__)
        found = [e for e in entries if matches_knowledge_term(e, needle)]
        return tuple(sorted(found, key=knowledge_search_order))


class SqlContactStore(ContactStore):
    """Emergency contact store over the emergency_contacts table."""
    
    def __init__(self, db: DatabaseManager) -> None:
        self._db = db
    
    async def list_contacts(self, category: Optional[ContactCategory] = None) -> Sequence[EmergencyContact]:
        query = select(EmergencyContactModel).order_by(EmergencyContactModel.name)
        if category is not None:
            query = query.where(EmergencyContactModel.category == category.value)
        try:
            async with self._db.session() as session:
                rows = (await session.execute(query)).scalars().all()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreUnavailableError("contacts", str(e), original_error=e) from e
        return _to_domain(rows, EmergencyContact.from_dict, EmergencyContactModel.__tablename__)


class SqlHelperStore(HelperStore):
    """Helper store over the helpers_with_stats view."""
    
    def __init__(self, db: DatabaseManager) -> None:
        self._db = db
    
    async def list_helpers(self, category_id: Optional[str] = None) -> Sequence[HelperRecord]:
        query = select(HelperModel)
        if category_id is not None:
            query = query.where(HelperModel.category_name == category_id)
        try:
            async with self._db.session() as session:
                rows = (await session.execute(query)).scalars().all()
        except (SQLAlchemyError, RuntimeError) as e:
            raise StoreUnavailableError("helpers", str(e), original_error=e) from e
        return _to_domain(rows, HelperRecord.from_dict, HelperModel.__tablename__)
