from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.follow import Follow

class FollowRepository(BaseRepository[Follow]):
    """Repository for the follow graph"""

    def __init__(self, db: Session):
        super().__init__(Follow, db)

    def get_follow(self, follower_id: str, following_id: str) -> Optional[Follow]:
        return self.get((follower_id, following_id))

    def following_ids(self, user_id: str) -> List[str]:
        """Ids of users this user follows"""
        rows = self.db.query(Follow.following_id).filter(Follow.follower_id == user_id).all()
        return [row[0] for row in rows]

    def follower_ids(self, user_id: str) -> List[str]:
        """Ids of users following this user"""
        rows = self.db.query(Follow.follower_id).filter(Follow.following_id == user_id).all()
        return [row[0] for row in rows]
