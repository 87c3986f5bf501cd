"""SQLAlchemy ORM model for site_settings key/value table."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from .base import Base


class SiteSettingModel(Base):
    __tablename__ = "site_settings"

    id = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False, default="")
    type = Column(String(20), nullable=False, default="string")
    description = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
