from typing import List
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.activity import Activity
from cinecircle.models.notification import Notification

class ActivityRepository(BaseRepository[Activity]):
    """Append-only activity rows"""

    def __init__(self, db: Session):
        super().__init__(Activity, db)

    def list_for_actors(self, user_ids: List[str], limit: int, offset: int = 0) -> List[Activity]:
        """Activities whose actor is in ``user_ids``, newest first"""
        if not user_ids:
            return []
        return self.db.query(Activity).filter(
            Activity.user_id.in_(user_ids)
        ).order_by(Activity.created_at.desc()).offset(offset).limit(limit).all()

class NotificationRepository(BaseRepository[Notification]):
    """Per-recipient notification rows"""

    def __init__(self, db: Session):
        super().__init__(Notification, db)

    def list_for_recipient(self, user_id: str, limit: int, unread_only: bool = False) -> List[Notification]:
        query = self.db.query(Notification).filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.read.is_(False))
        return query.order_by(Notification.created_at.desc()).limit(limit).all()

    def mark_read(self, user_id: str, notification_ids: List[str]) -> int:
        """Mark the recipient's own notifications as read"""
        if not notification_ids:
            return 0
        updated = self.db.query(Notification).filter(
            Notification.user_id == user_id,
            Notification.id.in_(notification_ids),
            Notification.read.is_(False)
        ).update({Notification.read: True}, synchronize_session=False)
        self.commit()
        return updated

    def mark_all_read(self, user_id: str) -> int:
        updated = self.db.query(Notification).filter(
            Notification.user_id == user_id,
            Notification.read.is_(False)
        ).update({Notification.read: True}, synchronize_session=False)
        self.commit()
        return updated

    def unread_count(self, user_id: str) -> int:
        return self.db.query(Notification).filter(
            Notification.user_id == user_id,
            Notification.read.is_(False)
        ).count()
