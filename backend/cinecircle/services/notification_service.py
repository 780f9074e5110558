import logging
import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.core.config import get_settings
from cinecircle.core.exceptions import ValidationException
from cinecircle.repositories.feed_repository import NotificationRepository
from cinecircle.schemas.notification import NotificationResponse
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

class NotificationService:
    """Per-recipient notification inbox"""

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()
        self.notification_repository = NotificationRepository(db)

    def notify(
        self,
        recipient_id: str,
        notification_type: str,
        from_user_id: Optional[str],
        title: str,
        message: Optional[str] = None,
        target_id: Optional[str] = None,
        target_type: Optional[str] = None
    ) -> None:
        """Deliver one notification. Failures are logged and never raised."""
        if recipient_id == from_user_id:
            return
        try:
            self.notification_repository.create({
                "id": str(uuid.uuid4()),
                "user_id": recipient_id,
                "notification_type": notification_type,
                "from_user_id": from_user_id,
                "target_id": target_id,
                "target_type": target_type,
                "title": title,
                "message": message,
                "read": False,
            })
            logger.info(f"Sent {notification_type} notification to user {recipient_id}")
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to send {notification_type} notification to user {recipient_id}: {str(e)}")

    def get_notifications(self, user_id: str, unread_only: bool = False) -> List[NotificationResponse]:
        notifications = self.notification_repository.list_for_recipient(
            user_id,
            limit=self.settings.NOTIFICATION_PAGE_SIZE,
            unread_only=unread_only
        )
        senders = ProfileService(self.db).get_profile_map(n.from_user_id for n in notifications)

        result = []
        for notification in notifications:
            response = NotificationResponse.model_validate(notification)
            response.from_user = senders.get(notification.from_user_id)
            result.append(response)
        return result

    def mark_read(self, user_id: str, notification_ids: Optional[List[str]] = None, mark_all_read: bool = False) -> int:
        """Mark the caller's notifications read, returns how many changed"""
        if mark_all_read:
            updated = self.notification_repository.mark_all_read(user_id)
        elif notification_ids:
            updated = self.notification_repository.mark_read(user_id, notification_ids)
        else:
            raise ValidationException("Provide notification_ids or mark_all_read")
        logger.info(f"Marked {updated} notifications read for user {user_id}")
        return updated

    def get_unread_count(self, user_id: str) -> int:
        return self.notification_repository.unread_count(user_id)
