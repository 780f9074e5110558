from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from cinecircle.db import Base, utcnow

class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "media_id", name="uq_review_owner_media"),
    )

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    media_id = Column(String, nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    title = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    contains_spoilers = Column(Boolean, default=False, nullable=False)
    likes_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    likes = relationship("ReviewLike", back_populates="review", cascade="all, delete-orphan")

class ReviewLike(Base):
    __tablename__ = "review_likes"
    review_id = Column(String, ForeignKey("reviews.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(String, primary_key=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    review = relationship("Review", back_populates="likes")
