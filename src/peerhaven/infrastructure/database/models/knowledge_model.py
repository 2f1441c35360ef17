"""
Knowledge Base Database Model

Read model of the ai_knowledge_base table.
"""

from sqlalchemy import JSON, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peerhaven.infrastructure.database.connection import Base


class KnowledgeModel(Base):
    """
    Knowledge base table ORM model.
    
    Table: ai_knowledge_base
    """
    
    __tablename__ = "ai_knowledge_base"
    
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    keywords: Mapped[list] = mapped_column(JSON, default=list)
    confidence_level: Mapped[float] = mapped_column(Float, default=0.5)
    category_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    
    def to_record(self) -> dict:
        return {
            "id": self.id,
            "topic": self.topic,
            "content": self.content,
            "keywords": list(self.keywords or []),
            "confidence_level": self.confidence_level,
            "category_id": self.category_id,
        }
