import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_storage_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MenuItem(Base):
    __tablename__ = "menu_items"

    storage_id = Column(String(32), primary_key=True, default=new_storage_id)
    business_id = Column(String, unique=True, nullable=False, index=True)  # e.g. "cf-001"
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    price_large = Column(Float, nullable=True)  # alternate size pricing
    category = Column(String, nullable=False, index=True)  # 'coffee', 'milktea', 'juice', ...
    image_url = Column(String, nullable=False)

    is_popular = Column(Boolean, nullable=False, default=False)
    is_best_seller = Column(Boolean, nullable=False, default=False)
    is_new = Column(Boolean, nullable=False, default=False)
    is_available = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<MenuItem {self.business_id} {self.name!r}>"
