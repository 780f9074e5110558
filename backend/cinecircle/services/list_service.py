import logging
import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from cinecircle.core.enums import ActivityType, TargetType
from cinecircle.core.exceptions import ConflictException, ForbiddenException, NotFoundException
from cinecircle.models.custom_list import CustomList
from cinecircle.repositories.list_repository import CustomListRepository, CustomListItemRepository
from cinecircle.repositories.watchlist_repository import WatchlistRepository
from cinecircle.schemas.custom_list import (
    CustomListCreate, CustomListDetailResponse, CustomListItemResponse,
    CustomListResponse, CustomListUpdate
)
from cinecircle.schemas.watchlist import WatchlistItemResponse
from cinecircle.services.activity_service import ActivityService
from cinecircle.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("name", "is_public")

class ListService:
    """Curated lists and their items"""

    def __init__(self, db: Session):
        self.db = db
        self.list_repository = CustomListRepository(db)
        self.item_repository = CustomListItemRepository(db)
        self.watchlist_repository = WatchlistRepository(db)
        self.activity_service = ActivityService(db)
        self.profile_service = ProfileService(db)

    def _to_response(self, lists: List[CustomList]) -> List[CustomListResponse]:
        owners = self.profile_service.get_profile_map(custom_list.user_id for custom_list in lists)
        result = []
        for custom_list in lists:
            response = CustomListResponse.model_validate(custom_list)
            response.user = owners.get(custom_list.user_id)
            result.append(response)
        return result

    def _get_owned(self, user_id: str, list_id: str) -> CustomList:
        custom_list = self.list_repository.get(list_id)
        if not custom_list:
            raise NotFoundException("List not found")
        if custom_list.user_id != user_id:
            raise ForbiddenException("You can only modify your own lists")
        return custom_list

    def _adjust_items_count(self, list_id: str, amount: int) -> None:
        try:
            self.list_repository.adjust_counter("items_count", amount, id=list_id)
        except Exception as e:
            logger.error(f"Failed to update items_count for list {list_id}: {str(e)}")

    def list_lists(self, viewer_id: Optional[str], user_id: Optional[str] = None, public_only: bool = False) -> List[CustomListResponse]:
        """A user's lists (public only unless the viewer owns them), or every public list"""
        if user_id:
            lists = self.list_repository.list_for_user(user_id, public_only=public_only or viewer_id != user_id)
        else:
            lists = self.list_repository.list_public()
        return self._to_response(lists)

    def create_list(self, user_id: str, data: CustomListCreate) -> CustomListResponse:
        list_data = data.model_dump()
        list_data.update({"id": str(uuid.uuid4()), "user_id": user_id, "items_count": 0})
        custom_list = self.list_repository.create(list_data)
        logger.info(f"User {user_id} created list {custom_list.id}")

        self.activity_service.record(
            user_id,
            ActivityType.CREATED_LIST.value,
            target_id=custom_list.id,
            target_type=TargetType.LIST.value,
            metadata={"name": custom_list.name}
        )
        return self._to_response([custom_list])[0]

    def get_list(self, viewer_id: Optional[str], list_id: str) -> CustomListDetailResponse:
        """List with items; private lists are invisible to everyone but the owner"""
        custom_list = self.list_repository.get(list_id)
        if not custom_list or not custom_list.is_visible_to(viewer_id):
            raise NotFoundException("List not found")

        items = self.item_repository.list_items(list_id)
        media = self.watchlist_repository.get_many_for_owner(custom_list.user_id, [i.media_id for i in items])

        item_responses = []
        for item in items:
            response = CustomListItemResponse.model_validate(item)
            if item.media_id in media:
                response.media = WatchlistItemResponse.model_validate(media[item.media_id])
            item_responses.append(response)

        summary = self._to_response([custom_list])[0]
        return CustomListDetailResponse(**summary.model_dump(), items=item_responses)

    def update_list(self, user_id: str, list_id: str, data: CustomListUpdate) -> CustomListResponse:
        custom_list = self._get_owned(user_id, list_id)
        updates = {
            field: value for field, value in data.model_dump(exclude_unset=True).items()
            if not (field in NON_NULLABLE_FIELDS and value is None)
        }
        custom_list = self.list_repository.update(custom_list, updates)
        return self._to_response([custom_list])[0]

    def delete_list(self, user_id: str, list_id: str) -> None:
        """Delete an owned list and its items"""
        custom_list = self._get_owned(user_id, list_id)
        self.list_repository.delete(custom_list)
        logger.info(f"User {user_id} deleted list {list_id}")

    def add_item(self, user_id: str, list_id: str, media_id: str) -> CustomListItemResponse:
        custom_list = self._get_owned(user_id, list_id)
        if self.item_repository.get_item(list_id, media_id):
            raise ConflictException("Item already in list")

        item = self.item_repository.create(
            {"list_id": list_id, "media_id": media_id},
            conflict_message="Item already in list"
        )
        response = CustomListItemResponse.model_validate(item)
        self._adjust_items_count(list_id, 1)

        self.activity_service.record(
            user_id,
            ActivityType.ADDED_TO_LIST.value,
            target_id=list_id,
            target_type=TargetType.LIST.value,
            metadata={"media_id": media_id}
        )

        media = self.watchlist_repository.get_item(custom_list.user_id, media_id)
        if media:
            response.media = WatchlistItemResponse.model_validate(media)
        return response

    def remove_item(self, user_id: str, list_id: str, media_id: str) -> None:
        """Remove an item; removing an absent item changes nothing"""
        self._get_owned(user_id, list_id)
        removed = self.item_repository.delete_where(list_id=list_id, media_id=media_id)
        if removed:
            self._adjust_items_count(list_id, -1)
            logger.info(f"User {user_id} removed {media_id} from list {list_id}")
