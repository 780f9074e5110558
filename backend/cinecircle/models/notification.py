from sqlalchemy import Column, String, DateTime, Boolean, Text
from cinecircle.db import Base, utcnow

class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True, index=True)
    # recipient
    user_id = Column(String, nullable=False, index=True)
    notification_type = Column(String, nullable=False)
    from_user_id = Column(String, nullable=True)
    target_id = Column(String, nullable=True)
    target_type = Column(String, nullable=True)
    title = Column(String, nullable=False)
    message = Column(Text, nullable=True)
    read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
