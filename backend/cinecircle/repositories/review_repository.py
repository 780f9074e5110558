from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.review import Review, ReviewLike

class ReviewRepository(BaseRepository[Review]):
    """Repository for reviews"""

    def __init__(self, db: Session):
        super().__init__(Review, db)

    def get_user_review(self, user_id: str, media_id: str) -> Optional[Review]:
        """Get user's review for specific content"""
        return self.filter_one_by(user_id=user_id, media_id=media_id)

    def list_by_media(self, media_id: str) -> List[Review]:
        return self.db.query(Review).filter(Review.media_id == media_id).order_by(Review.created_at.desc()).all()

    def list_by_user(self, user_id: str) -> List[Review]:
        return self.db.query(Review).filter(Review.user_id == user_id).order_by(Review.created_at.desc()).all()

class ReviewLikeRepository(BaseRepository[ReviewLike]):
    """Repository for review likes"""

    def __init__(self, db: Session):
        super().__init__(ReviewLike, db)

    def get_like(self, review_id: str, user_id: str) -> Optional[ReviewLike]:
        return self.get((review_id, user_id))
