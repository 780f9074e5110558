from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.repositories.base_repository import BaseRepository
from cinecircle.models.custom_list import CustomList, CustomListItem

class CustomListRepository(BaseRepository[CustomList]):
    """Repository for curated lists"""

    def __init__(self, db: Session):
        super().__init__(CustomList, db)

    def list_public(self) -> List[CustomList]:
        return self.db.query(CustomList).filter(
            CustomList.is_public.is_(True)
        ).order_by(CustomList.created_at.desc()).all()

    def list_for_user(self, user_id: str, public_only: bool = False) -> List[CustomList]:
        query = self.db.query(CustomList).filter(CustomList.user_id == user_id)
        if public_only:
            query = query.filter(CustomList.is_public.is_(True))
        return query.order_by(CustomList.created_at.desc()).all()

class CustomListItemRepository(BaseRepository[CustomListItem]):
    """Repository for list entries"""

    def __init__(self, db: Session):
        super().__init__(CustomListItem, db)

    def get_item(self, list_id: str, media_id: str) -> Optional[CustomListItem]:
        return self.get((list_id, media_id))

    def list_items(self, list_id: str) -> List[CustomListItem]:
        return self.db.query(CustomListItem).filter(
            CustomListItem.list_id == list_id
        ).order_by(CustomListItem.added_at.desc()).all()
