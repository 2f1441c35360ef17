"""
Helper Database Model

Read model of the helpers_with_stats view, which joins helper
profiles with their aggregated ratings.
"""

from sqlalchemy import JSON, Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peerhaven.infrastructure.database.connection import Base


class HelperModel(Base):
    """
    Helper listing ORM model.
    
    Table: helpers_with_stats
    """
    
    __tablename__ = "helpers_with_stats"
    
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), default="")
    last_name: Mapped[str] = mapped_column(String(100), default="")
    title: Mapped[str] = mapped_column(String(200), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    average_rating: Mapped[float] = mapped_column(Float, default=0.0)
    total_reviews: Mapped[int] = mapped_column(Integer, default=0)
    hourly_rate: Mapped[float] = mapped_column(Float, nullable=False)
    languages: Mapped[list] = mapped_column(JSON, default=list)
    specialties: Mapped[list] = mapped_column(JSON, default=list)
    category_name: Mapped[str] = mapped_column(String(64), index=True, default="")
    experience_years: Mapped[int] = mapped_column(Integer, default=0)
    location: Mapped[str] = mapped_column(String(200), default="")
    availability_status: Mapped[str] = mapped_column(String(20), default="offline")
    video_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    voice_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False)
    
    def to_record(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "title": self.title,
            "description": self.description,
            "average_rating": self.average_rating,
            "total_reviews": self.total_reviews,
            "hourly_rate": self.hourly_rate,
            "languages": list(self.languages or []),
            "specialties": list(self.specialties or []),
            "category_name": self.category_name,
            "experience_years": self.experience_years,
            "location": self.location,
            "availability_status": self.availability_status,
            "video_enabled": self.video_enabled,
            "voice_enabled": self.voice_enabled,
            "verified": self.verified,
        }
