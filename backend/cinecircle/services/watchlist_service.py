import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.core.enums import ActivityType, TargetType, WatchlistStatus
from cinecircle.core.exceptions import ConflictException, NotFoundException
from cinecircle.models.watchlist import WatchlistItem
from cinecircle.repositories.watchlist_repository import WatchlistRepository
from cinecircle.schemas.watchlist import WatchlistItemCreate, WatchlistItemUpdate
from cinecircle.services.activity_service import ActivityService

logger = logging.getLogger(__name__)

# columns that cannot be cleared with an explicit null
NON_NULLABLE_FIELDS = ("status", "tags")

class WatchlistService:
    """Watchlist operations scoped to the owning user"""

    def __init__(self, db: Session):
        self.db = db
        self.watchlist_repository = WatchlistRepository(db)
        self.activity_service = ActivityService(db)

    def get_watchlist(self, user_id: str, status: Optional[str] = None) -> List[WatchlistItem]:
        """Get a user's watchlist, newest first"""
        return self.watchlist_repository.get_user_watchlist(user_id, status)

    def add_item(self, user_id: str, data: WatchlistItemCreate) -> WatchlistItem:
        """Add a title; one item per (owner, tmdb id, media type)"""
        item_id = WatchlistItem.make_id(data.tmdb_id, data.media_type)
        if self.watchlist_repository.get_item(user_id, item_id):
            raise ConflictException("Item already in watchlist")

        item_data = data.model_dump()
        item_data.update({"id": item_id, "user_id": user_id})
        item = self.watchlist_repository.create(item_data, conflict_message="Item already in watchlist")
        logger.info(f"User {user_id} added {item_id} to watchlist")

        self.activity_service.record(
            user_id,
            ActivityType.ADDED_ITEM.value,
            target_id=item.id,
            target_type=TargetType.MEDIA.value,
            metadata={"title": item.title, "media_type": item.media_type}
        )
        return item

    def update_item(self, user_id: str, item_id: str, data: WatchlistItemUpdate) -> WatchlistItem:
        item = self.watchlist_repository.get_item(user_id, item_id)
        if not item:
            raise NotFoundException("Watchlist item not found")

        updates = data.model_dump(exclude_unset=True)
        for field in NON_NULLABLE_FIELDS:
            if field in updates and updates[field] is None:
                updates.pop(field)

        previous_status = item.status
        item = self.watchlist_repository.update(item, updates)
        logger.info(f"User {user_id} updated watchlist item {item_id}")

        finished = WatchlistStatus.finished()
        if item.status in finished and previous_status not in finished:
            self.activity_service.record(
                user_id,
                ActivityType.WATCHED_ITEM.value,
                target_id=item.id,
                target_type=TargetType.MEDIA.value,
                metadata={"title": item.title, "status": item.status, "media_type": item.media_type}
            )
        return item

    def remove_item(self, user_id: str, item_id: str) -> None:
        item = self.watchlist_repository.get_item(user_id, item_id)
        if not item:
            raise NotFoundException("Watchlist item not found")
        self.watchlist_repository.delete(item)
        logger.info(f"User {user_id} removed {item_id} from watchlist")
