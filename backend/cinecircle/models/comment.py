from sqlalchemy import Column, String, ForeignKey, Boolean, DateTime, Text
from cinecircle.db import Base, utcnow

class Comment(Base):
    __tablename__ = "comments"
    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    media_id = Column(String, nullable=False, index=True)
    parent_id = Column(String, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True, index=True)
    content = Column(Text, nullable=False)
    contains_spoilers = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
