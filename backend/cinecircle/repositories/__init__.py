from .base_repository import BaseRepository
from .profile_repository import ProfileRepository
from .watchlist_repository import WatchlistRepository
from .review_repository import ReviewRepository, ReviewLikeRepository
from .comment_repository import CommentRepository
from .list_repository import CustomListRepository, CustomListItemRepository
from .follow_repository import FollowRepository
from .feed_repository import ActivityRepository, NotificationRepository
from .recommendation_repository import RecommendationRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "WatchlistRepository",
    "ReviewRepository",
    "ReviewLikeRepository",
    "CommentRepository",
    "CustomListRepository",
    "CustomListItemRepository",
    "FollowRepository",
    "ActivityRepository",
    "NotificationRepository",
    "RecommendationRepository"
]
