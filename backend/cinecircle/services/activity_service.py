import logging
import uuid
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from cinecircle.core.config import get_settings
from cinecircle.core.exceptions import UnauthenticatedException, ValidationException
from cinecircle.repositories.feed_repository import ActivityRepository
from cinecircle.repositories.follow_repository import FollowRepository
from cinecircle.schemas.activity import ActivityResponse
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

class ActivityService:
    """Writes feed-worthy events and reads them back as a feed"""

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()
        self.activity_repository = ActivityRepository(db)
        self.follow_repository = FollowRepository(db)

    def record(
        self,
        actor_id: str,
        activity_type: str,
        target_id: Optional[str] = None,
        target_type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Append one activity row. Failures are logged and never raised."""
        try:
            self.activity_repository.create({
                "id": str(uuid.uuid4()),
                "user_id": actor_id,
                "activity_type": activity_type,
                "target_id": target_id,
                "target_type": target_type,
                "extra": metadata or {},
            })
            logger.info(f"Recorded {activity_type} activity for user {actor_id}")
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to record {activity_type} activity for user {actor_id}: {str(e)}")

    def get_feed(
        self,
        viewer_id: Optional[str],
        target_user_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[ActivityResponse]:
        """A user's own activity, or the activity of everyone the viewer follows"""
        if limit is None:
            limit = self.settings.FEED_DEFAULT_LIMIT
        if limit < 1 or limit > self.settings.FEED_MAX_LIMIT:
            raise ValidationException(f"limit must be between 1 and {self.settings.FEED_MAX_LIMIT}")
        if offset < 0:
            raise ValidationException("offset must not be negative")

        if target_user_id:
            actor_ids = [target_user_id]
        elif viewer_id:
            actor_ids = self.follow_repository.following_ids(viewer_id)
        else:
            raise UnauthenticatedException("Sign in or pass user_id to read a feed")

        activities = self.activity_repository.list_for_actors(actor_ids, limit=limit, offset=offset)
        profiles = ProfileService(self.db).get_profile_map(a.user_id for a in activities)

        feed = []
        for activity in activities:
            response = ActivityResponse.model_validate(activity)
            response.user = profiles.get(activity.user_id)
            feed.append(response)
        return feed
