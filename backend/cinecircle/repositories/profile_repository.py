from typing import Dict, Iterable, List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.profile import Profile

class ProfileRepository(BaseRepository[Profile]):
    """Profile repository with profile-specific operations"""

    def __init__(self, db: Session):
        super().__init__(Profile, db)

    def get_by_username(self, username: str) -> Optional[Profile]:
        """Get profile by username"""
        return self.filter_one_by(username=username)

    def username_taken_by_other(self, username: str, user_id: str) -> bool:
        """Check if another user already holds this username (exact match)"""
        return self.db.query(Profile).filter(
            Profile.username == username,
            Profile.user_id != user_id
        ).first() is not None

    def get_many(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        """Profiles keyed by user id; missing ids are simply absent"""
        ids = {user_id for user_id in user_ids if user_id}
        if not ids:
            return {}
        profiles = self.db.query(Profile).filter(Profile.user_id.in_(ids)).all()
        return {profile.user_id: profile for profile in profiles}

    def search(self, term: str, limit: int) -> List[Profile]:
        """Case-insensitive substring match over username, display name and user id"""
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        return self.db.query(Profile).filter(
            or_(
                Profile.username.ilike(pattern, escape="\\"),
                Profile.display_name.ilike(pattern, escape="\\"),
                Profile.user_id.ilike(pattern, escape="\\"),
            )
        ).order_by(Profile.created_at.desc()).limit(limit).all()

    def newest(self, limit: int) -> List[Profile]:
        return self.db.query(Profile).order_by(Profile.created_at.desc()).limit(limit).all()
