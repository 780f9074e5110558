import logging
from typing import List
from sqlalchemy.orm import Session
from cinecircle.core.enums import ActivityType, FollowDirection, NotificationType, TargetType
from cinecircle.core.exceptions import ConflictException, NotFoundException, ValidationException
from cinecircle.models.follow import Follow
from cinecircle.repositories.follow_repository import FollowRepository
from cinecircle.repositories.profile_repository import ProfileRepository
from cinecircle.schemas.profile import ProfileResponse
from cinecircle.services.activity_service import ActivityService
from cinecircle.services.notification_service import NotificationService
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

class FollowService:
    """Follow graph mutations and their fan-out"""

    def __init__(self, db: Session):
        self.db = db
        self.follow_repository = FollowRepository(db)
        self.profile_repository = ProfileRepository(db)
        self.activity_service = ActivityService(db)
        self.notification_service = NotificationService(db)

    def list_connections(self, user_id: str, direction: str = FollowDirection.FOLLOWING.value) -> List[ProfileResponse]:
        """Profiles the user follows, or profiles following the user"""
        if direction == FollowDirection.FOLLOWERS.value:
            user_ids = self.follow_repository.follower_ids(user_id)
        else:
            user_ids = self.follow_repository.following_ids(user_id)
        profiles = ProfileService(self.db).get_profile_map(user_ids)
        return [profiles[uid] for uid in user_ids if uid in profiles]

    def is_following(self, follower_id: str, following_id: str) -> bool:
        return self.follow_repository.get_follow(follower_id, following_id) is not None

    def follow(self, follower_id: str, following_id: str) -> Follow:
        if follower_id == following_id:
            raise ValidationException("You cannot follow yourself")
        if not self.profile_repository.get(following_id):
            raise NotFoundException("User not found")
        if self.is_following(follower_id, following_id):
            raise ConflictException("Already following this user")

        follow = self.follow_repository.create(
            {"follower_id": follower_id, "following_id": following_id},
            conflict_message="Already following this user"
        )
        logger.info(f"User {follower_id} followed {following_id}")

        self.activity_service.record(
            follower_id,
            ActivityType.FOLLOWED_USER.value,
            target_id=following_id,
            target_type=TargetType.USER.value
        )
        self.notification_service.notify(
            following_id,
            NotificationType.FOLLOW.value,
            from_user_id=follower_id,
            title="New Follower",
            message="started following you",
            target_id=follower_id,
            target_type=TargetType.USER.value
        )
        return follow

    def unfollow(self, follower_id: str, following_id: str) -> None:
        """Remove the follow if present; absent follows are a no-op"""
        removed = self.follow_repository.delete_where(follower_id=follower_id, following_id=following_id)
        if removed:
            logger.info(f"User {follower_id} unfollowed {following_id}")
