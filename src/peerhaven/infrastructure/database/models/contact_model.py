"""
Emergency Contact Database Model

Read model of the emergency_contacts table.
"""

from typing import Optional

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peerhaven.infrastructure.database.connection import Base


class EmergencyContactModel(Base):
    """
    Emergency contacts table ORM model.
    
    Table: emergency_contacts
    """
    
    __tablename__ = "emergency_contacts"
    
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="")
    phone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    country: Mapped[str] = mapped_column(String(100), default="Global")
    category: Mapped[str] = mapped_column(String(50), index=True, nullable=False)
    available_24_7: Mapped[bool] = mapped_column(Boolean, default=False)
    languages: Mapped[list] = mapped_column(JSON, default=list)
    
    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "phone": self.phone,
            "website": self.website,
            "country": self.country,
            "category": self.category,
            "available_24_7": self.available_24_7,
            "languages": list(self.languages or []),
        }
