from sqlalchemy import Column, String, DateTime, CheckConstraint
from cinecircle.db import Base, utcnow

class Follow(Base):
    __tablename__ = "follows"
    __table_args__ = (
        CheckConstraint("follower_id <> following_id", name="ck_follow_not_self"),
    )

    follower_id = Column(String, primary_key=True, index=True)
    following_id = Column(String, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
