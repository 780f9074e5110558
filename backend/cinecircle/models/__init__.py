from cinecircle.db import Base
from .profile import Profile
from .watchlist import WatchlistItem
from .review import Review, ReviewLike
from .comment import Comment
from .custom_list import CustomList, CustomListItem
from .follow import Follow
from .activity import Activity
from .notification import Notification
from .recommendation import Recommendation

__all__ = [
    'Base', 'Profile', 'WatchlistItem', 'Review', 'ReviewLike', 'Comment',
    'CustomList', 'CustomListItem', 'Follow', 'Activity', 'Notification',
    'Recommendation'
]
