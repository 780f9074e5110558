from typing import List
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.recommendation import Recommendation

class RecommendationRepository(BaseRepository[Recommendation]):
    """Repository for user-to-user recommendations"""

    def __init__(self, db: Session):
        super().__init__(Recommendation, db)

    def get_received(self, user_id: str) -> List[Recommendation]:
        """Recommendations addressed to the user, newest first"""
        return self.db.query(Recommendation).filter(
            Recommendation.to_user_id == user_id
        ).order_by(Recommendation.created_at.desc()).all()
