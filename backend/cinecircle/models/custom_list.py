from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from cinecircle.db import Base, utcnow

class CustomList(Base):
    __tablename__ = "custom_lists"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    is_public = Column(Boolean, default=True, nullable=False)
    cover_image_url = Column(String, nullable=True)
    items_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    items = relationship("CustomListItem", back_populates="custom_list", cascade="all, delete-orphan")

    def is_visible_to(self, user_id) -> bool:
        return self.is_public or self.user_id == user_id

class CustomListItem(Base):
    __tablename__ = "custom_list_items"

    list_id = Column(String, ForeignKey("custom_lists.id", ondelete="CASCADE"), primary_key=True)
    media_id = Column(String, primary_key=True)
    added_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    custom_list = relationship("CustomList", back_populates="items")
