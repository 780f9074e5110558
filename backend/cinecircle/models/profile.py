from sqlalchemy import Column, String, DateTime, Text, JSON
from cinecircle.db import Base, utcnow

class Profile(Base):
    __tablename__ = "profiles"
    user_id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=True)
    display_name = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String, nullable=True)
    favorite_genres = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
