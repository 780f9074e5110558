import logging
import uuid
from typing import List
from sqlalchemy.orm import Session
from cinecircle.core.enums import NotificationType, TargetType
from cinecircle.core.exceptions import NotFoundException, ValidationException
from cinecircle.models.recommendation import Recommendation
from cinecircle.repositories.profile_repository import ProfileRepository
from cinecircle.repositories.recommendation_repository import RecommendationRepository
from cinecircle.repositories.watchlist_repository import WatchlistRepository
from cinecircle.schemas.recommendation import RecommendationCreate, RecommendationResponse
from cinecircle.schemas.watchlist import WatchlistItemResponse
from cinecircle.services.notification_service import NotificationService
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "recommended this to you"

class RecommendationService:
    """User-to-user title recommendations"""

    def __init__(self, db: Session):
        self.db = db
        self.recommendation_repository = RecommendationRepository(db)
        self.profile_repository = ProfileRepository(db)
        self.watchlist_repository = WatchlistRepository(db)
        self.notification_service = NotificationService(db)

    def _to_response(self, recommendations: List[Recommendation]) -> List[RecommendationResponse]:
        senders = ProfileService(self.db).get_profile_map(r.from_user_id for r in recommendations)
        result = []
        for recommendation in recommendations:
            response = RecommendationResponse.model_validate(recommendation)
            response.from_user = senders.get(recommendation.from_user_id)
            # the sender's own watchlist entry carries the title metadata
            media = self.watchlist_repository.get_item(recommendation.from_user_id, recommendation.media_id)
            if media:
                response.media = WatchlistItemResponse.model_validate(media)
            result.append(response)
        return result

    def get_received(self, user_id: str) -> List[RecommendationResponse]:
        return self._to_response(self.recommendation_repository.get_received(user_id))

    def create_recommendation(self, user_id: str, data: RecommendationCreate) -> RecommendationResponse:
        """Recommend a title to another user and notify them"""
        if data.to_user_id == user_id:
            raise ValidationException("You cannot recommend to yourself")
        if not self.profile_repository.get(data.to_user_id):
            raise NotFoundException("User not found")

        recommendation = self.recommendation_repository.create({
            "id": str(uuid.uuid4()),
            "from_user_id": user_id,
            "to_user_id": data.to_user_id,
            "media_id": data.media_id,
            "message": data.message,
        })
        logger.info(f"User {user_id} recommended {data.media_id} to {data.to_user_id}")

        self.notification_service.notify(
            data.to_user_id,
            NotificationType.RECOMMENDATION.value,
            from_user_id=user_id,
            title="New Recommendation",
            message=data.message or DEFAULT_MESSAGE,
            target_id=data.media_id,
            target_type=TargetType.MEDIA.value
        )
        return self._to_response([recommendation])[0]
