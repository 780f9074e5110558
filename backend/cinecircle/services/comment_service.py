import logging
import uuid
from typing import List
from sqlalchemy.orm import Session
from cinecircle.core.exceptions import ForbiddenException, NotFoundException, ValidationException
from cinecircle.repositories.comment_repository import CommentRepository
from cinecircle.schemas.comment import CommentCreate, CommentResponse
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

class CommentService:
    """Comment threads, one level deep"""

    def __init__(self, db: Session):
        self.db = db
        self.comment_repository = CommentRepository(db)
        self.profile_service = ProfileService(db)

    def list_comments(self, media_id: str) -> List[CommentResponse]:
        """Top-level comments for a title with their replies"""
        comments = self.comment_repository.list_top_level(media_id)
        replies = self.comment_repository.replies_by_parent([c.id for c in comments])

        author_ids = {c.user_id for c in comments}
        for thread in replies.values():
            author_ids.update(reply.user_id for reply in thread)
        authors = self.profile_service.get_profile_map(author_ids)

        result = []
        for comment in comments:
            thread = []
            for reply in replies.get(comment.id, []):
                reply_response = CommentResponse.model_validate(reply)
                reply_response.user = authors.get(reply.user_id)
                thread.append(reply_response)

            response = CommentResponse.model_validate(comment)
            response.user = authors.get(comment.user_id)
            response.replies = thread
            response.reply_count = len(thread)
            result.append(response)
        return result

    def create_comment(self, user_id: str, data: CommentCreate) -> CommentResponse:
        if data.parent_id:
            parent = self.comment_repository.get(data.parent_id)
            if not parent:
                raise NotFoundException("Parent comment not found")
            if parent.parent_id is not None:
                raise ValidationException("Replies can only be added to top-level comments")
            if parent.media_id != data.media_id:
                raise ValidationException("Reply must be on the same title as its parent")

        comment_data = data.model_dump()
        comment_data.update({"id": str(uuid.uuid4()), "user_id": user_id})
        comment = self.comment_repository.create(comment_data)
        logger.info(f"User {user_id} commented on {comment.media_id}")

        response = CommentResponse.model_validate(comment)
        response.user = self.profile_service.get_profile_map([user_id]).get(user_id)
        return response

    def delete_comment(self, user_id: str, comment_id: str) -> None:
        """Delete an owned comment and its replies"""
        comment = self.comment_repository.get(comment_id)
        if not comment:
            raise NotFoundException("Comment not found")
        if comment.user_id != user_id:
            raise ForbiddenException("You can only delete your own comments")
        self.comment_repository.delete_with_replies(comment)
        logger.info(f"User {user_id} deleted comment {comment_id}")
