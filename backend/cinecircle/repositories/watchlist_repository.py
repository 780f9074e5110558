from typing import Dict, Iterable, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.watchlist import WatchlistItem

class WatchlistRepository(BaseRepository[WatchlistItem]):
    """Repository for user watchlists"""

    def __init__(self, db: Session):
        super().__init__(WatchlistItem, db)

    def get_item(self, user_id: str, item_id: str) -> Optional[WatchlistItem]:
        return self.filter_one_by(user_id=user_id, id=item_id)

    def get_user_watchlist(self, user_id: str, status: Optional[str] = None) -> List[WatchlistItem]:
        """Get user's watchlist, newest first"""
        query = self.db.query(WatchlistItem).filter(WatchlistItem.user_id == user_id)
        if status:
            query = query.filter(WatchlistItem.status == status)
        return query.order_by(WatchlistItem.added_at.desc()).all()

    def get_many_for_owner(self, user_id: str, item_ids: Iterable[str]) -> Dict[str, WatchlistItem]:
        ids = set(item_ids)
        if not ids:
            return {}
        items = self.db.query(WatchlistItem).filter(
            WatchlistItem.user_id == user_id,
            WatchlistItem.id.in_(ids)
        ).all()
        return {item.id: item for item in items}

    def status_counts(self, user_id: str) -> Dict[str, int]:
        rows = (
            self.db.query(WatchlistItem.status, func.count(WatchlistItem.id))
            .filter(WatchlistItem.user_id == user_id)
            .group_by(WatchlistItem.status)
            .all()
        )
        return {status: count for status, count in rows}

    def average_rating(self, user_id: str) -> Optional[float]:
        value = (
            self.db.query(func.avg(WatchlistItem.rating))
            .filter(WatchlistItem.user_id == user_id, WatchlistItem.rating.isnot(None))
            .scalar()
        )
        return float(value) if value is not None else None
