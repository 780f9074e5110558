from sqlalchemy import Column, String, DateTime, JSON
from cinecircle.db import Base, utcnow

class Activity(Base):
    __tablename__ = "activities"

    id = Column(String, primary_key=True, index=True)
    # actor
    user_id = Column(String, nullable=False, index=True)
    activity_type = Column(String, nullable=False)
    target_id = Column(String, nullable=True)
    target_type = Column(String, nullable=True)
    # "metadata" is reserved on declarative classes
    extra = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
