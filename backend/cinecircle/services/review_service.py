import logging
import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.core.enums import ActivityType, TargetType
from cinecircle.core.exceptions import (
    ConflictException, ForbiddenException, NotFoundException, ValidationException
)
from cinecircle.models.review import Review
from cinecircle.repositories.review_repository import ReviewRepository, ReviewLikeRepository
from cinecircle.schemas.review import LikeToggleResponse, ReviewCreate, ReviewResponse, ReviewUpdate
from cinecircle.services.activity_service import ActivityService
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("rating", "contains_spoilers")

class ReviewService:
    """Reviews and review likes"""

    def __init__(self, db: Session):
        self.db = db
        self.review_repository = ReviewRepository(db)
        self.like_repository = ReviewLikeRepository(db)
        self.activity_service = ActivityService(db)
        self.profile_service = ProfileService(db)

    def _to_response(self, reviews: List[Review]) -> List[ReviewResponse]:
        authors = self.profile_service.get_profile_map(r.user_id for r in reviews)
        result = []
        for review in reviews:
            response = ReviewResponse.model_validate(review)
            response.user = authors.get(review.user_id)
            result.append(response)
        return result

    def _get_owned(self, user_id: str, review_id: str) -> Review:
        review = self.review_repository.get(review_id)
        if not review:
            raise NotFoundException("Review not found")
        if review.user_id != user_id:
            raise ForbiddenException("You can only modify your own reviews")
        return review

    def list_reviews(self, media_id: Optional[str] = None, user_id: Optional[str] = None) -> List[ReviewResponse]:
        """Reviews for a title or by a user, newest first"""
        if media_id:
            reviews = self.review_repository.list_by_media(media_id)
        elif user_id:
            reviews = self.review_repository.list_by_user(user_id)
        else:
            raise ValidationException("Provide media_id or user_id")
        return self._to_response(reviews)

    def create_review(self, user_id: str, data: ReviewCreate) -> ReviewResponse:
        if self.review_repository.get_user_review(user_id, data.media_id):
            raise ConflictException("You have already reviewed this title")

        review_data = data.model_dump()
        review_data.update({"id": str(uuid.uuid4()), "user_id": user_id, "likes_count": 0})
        review = self.review_repository.create(review_data, conflict_message="You have already reviewed this title")
        logger.info(f"User {user_id} reviewed {review.media_id}")

        self.activity_service.record(
            user_id,
            ActivityType.REVIEWED.value,
            target_id=review.media_id,
            target_type=TargetType.MEDIA.value,
            metadata={"rating": review.rating, "title": review.title}
        )
        return self._to_response([review])[0]

    def update_review(self, user_id: str, review_id: str, data: ReviewUpdate) -> ReviewResponse:
        review = self._get_owned(user_id, review_id)
        updates = {
            field: value for field, value in data.model_dump(exclude_unset=True).items()
            if not (field in NON_NULLABLE_FIELDS and value is None)
        }
        review = self.review_repository.update(review, updates)
        return self._to_response([review])[0]

    def delete_review(self, user_id: str, review_id: str) -> None:
        """Delete an owned review together with its likes"""
        review = self._get_owned(user_id, review_id)
        self.review_repository.delete(review)
        logger.info(f"User {user_id} deleted review {review_id}")

    def toggle_like(self, user_id: str, review_id: str) -> LikeToggleResponse:
        """Like the review, or remove the caller's existing like"""
        review = self.review_repository.get(review_id)
        if not review:
            raise NotFoundException("Review not found")

        like = self.like_repository.get_like(review_id, user_id)
        if like:
            self.like_repository.delete(like)
            liked, delta = False, -1
        else:
            self.like_repository.create(
                {"review_id": review_id, "user_id": user_id},
                conflict_message="Review already liked"
            )
            liked, delta = True, 1

        try:
            self.review_repository.adjust_counter("likes_count", delta, id=review_id)
        except Exception as e:
            logger.error(f"Failed to update likes_count for review {review_id}: {str(e)}")

        self.db.refresh(review)
        return LikeToggleResponse(liked=liked, likes_count=review.likes_count)
