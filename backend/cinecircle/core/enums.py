import enum
from enum import IntEnum

class MediaType(str, enum.Enum):
    MOVIE = "movie"
    TV = "tv"

class WatchlistStatus(str, enum.Enum):
    WANT_TO_WATCH = "want_to_watch"
    CURRENTLY_WATCHING = "currently_watching"
    WATCHED = "watched"
    DROPPED = "dropped"
    COMPLETED = "completed"

    @classmethod
    def finished(cls) -> frozenset:
        """Statuses that count as having seen the title"""
        return frozenset({cls.WATCHED.value, cls.COMPLETED.value})

class Priority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class ActivityType(str, enum.Enum):
    ADDED_ITEM = "added_item"
    WATCHED_ITEM = "watched_item"
    REVIEWED = "reviewed"
    FOLLOWED_USER = "followed_user"
    CREATED_LIST = "created_list"
    ADDED_TO_LIST = "added_to_list"

class NotificationType(str, enum.Enum):
    FOLLOW = "follow"
    RECOMMENDATION = "recommendation"
    # reserved, nothing emits these yet
    REVIEW = "review"
    COMMENT = "comment"
    LIKE_REVIEW = "like_review"
    LIKE_COMMENT = "like_comment"
    ACTIVITY = "activity"

class TargetType(str, enum.Enum):
    MEDIA = "media"
    LIST = "list"
    USER = "user"

class FollowDirection(str, enum.Enum):
    FOLLOWING = "following"
    FOLLOWERS = "followers"

class MovieGenre(IntEnum):
    """TMDB Movie Genres - https://developer.themoviedb.org/reference/genre-movie-list"""
    ACTION = 28
    ADVENTURE = 12
    ANIMATION = 16
    COMEDY = 35
    CRIME = 80
    DOCUMENTARY = 99
    DRAMA = 18
    FAMILY = 10751
    FANTASY = 14
    HISTORY = 36
    HORROR = 27
    MUSIC = 10402
    MYSTERY = 9648
    ROMANCE = 10749
    SCIENCE_FICTION = 878
    TV_MOVIE = 10770
    THRILLER = 53
    WAR = 10752
    WESTERN = 37

class TVGenre(IntEnum):
    """TMDB TV Genres - https://developer.themoviedb.org/reference/genre-tv-list"""
    ACTION_ADVENTURE = 10759
    ANIMATION = 16
    COMEDY = 35
    CRIME = 80
    DOCUMENTARY = 99
    DRAMA = 18
    FAMILY = 10751
    KIDS = 10762
    MYSTERY = 9648
    NEWS = 10763
    REALITY = 10764
    SCIENCE_FICTION_FANTASY = 10765
    SOAP = 10766
    TALK = 10767
    WAR_POLITICS = 10768
    WESTERN = 37

class GenreHelper:
    """Lookups over the TMDB genre ids users pick as favourites"""

    @staticmethod
    def is_known_genre(genre_id: int) -> bool:
        """True when the id is a movie or a TV genre"""
        return genre_id in MovieGenre._value2member_map_ or genre_id in TVGenre._value2member_map_

