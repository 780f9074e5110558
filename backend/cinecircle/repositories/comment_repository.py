from typing import Dict, List
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.comment import Comment

class CommentRepository(BaseRepository[Comment]):
    """Repository for comments and their single level of replies"""

    def __init__(self, db: Session):
        super().__init__(Comment, db)

    def list_top_level(self, media_id: str) -> List[Comment]:
        """Top-level comments on a title, newest first"""
        return self.db.query(Comment).filter(
            Comment.media_id == media_id,
            Comment.parent_id.is_(None)
        ).order_by(Comment.created_at.desc()).all()

    def replies_by_parent(self, parent_ids: List[str]) -> Dict[str, List[Comment]]:
        """Replies grouped by parent id, oldest first"""
        grouped: Dict[str, List[Comment]] = {parent_id: [] for parent_id in parent_ids}
        if not parent_ids:
            return grouped
        replies = self.db.query(Comment).filter(
            Comment.parent_id.in_(parent_ids)
        ).order_by(Comment.created_at.asc()).all()
        for reply in replies:
            grouped.setdefault(reply.parent_id, []).append(reply)
        return grouped

    def delete_with_replies(self, comment: Comment) -> None:
        self.db.query(Comment).filter(Comment.parent_id == comment.id).delete(synchronize_session=False)
        self.db.delete(comment)
        self.commit()
