import logging
from typing import Dict, Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
from cinecircle.core.auth import Identity
from cinecircle.core.enums import WatchlistStatus
from cinecircle.core.exceptions import ConflictException, NotFoundException, ValidationException
from cinecircle.models.profile import Profile
from cinecircle.repositories.profile_repository import ProfileRepository
from cinecircle.repositories.watchlist_repository import WatchlistRepository
from cinecircle.repositories.review_repository import ReviewRepository
from cinecircle.repositories.follow_repository import FollowRepository
from cinecircle.repositories.list_repository import CustomListRepository
from cinecircle.schemas.profile import ProfileResponse, ProfileStats, ProfileUpsert

logger = logging.getLogger(__name__)

class ProfileService:
    """Profile bootstrap, lookup and statistics"""

    def __init__(self, db: Session):
        self.db = db
        self.profile_repository = ProfileRepository(db)

    def ensure_profile(self, identity: Identity) -> Tuple[Profile, bool]:
        """Create the caller's profile on first sight.

        Returns the profile and whether it was created by this call. A
        concurrent first request may win the insert; the loser re-reads.
        """
        profile = self.profile_repository.get(identity.user_id)
        if profile:
            return profile, False

        try:
            profile = self.profile_repository.create({
                "user_id": identity.user_id,
                "username": None,
                "display_name": identity.display_name,
                "avatar_url": identity.avatar_url,
                "favorite_genres": [],
            })
        except ConflictException:
            profile = self.profile_repository.get(identity.user_id)
            if profile is None:
                raise
            return profile, False

        logger.info(f"Created profile for user {identity.user_id}")
        return profile, True

    def get_profile(self, username: Optional[str] = None, user_id: Optional[str] = None) -> Profile:
        """Look up by username (falling back to user id) or by user id"""
        if not username and not user_id:
            raise ValidationException("Provide username or user_id")

        profile = None
        if username:
            profile = self.profile_repository.get_by_username(username)
            if profile is None:
                profile = self.profile_repository.get(username)
        else:
            profile = self.profile_repository.get(user_id)

        if profile is None:
            raise NotFoundException("Profile not found")
        return profile

    def upsert_profile(self, user_id: str, data: ProfileUpsert) -> Profile:
        """Partial update of the caller's own profile"""
        profile = self.profile_repository.get(user_id)
        if profile is None:
            raise NotFoundException("Profile not found")

        updates = data.model_dump(exclude_unset=True)
        username = updates.pop("username", None)
        if username is not None and username != profile.username:
            if profile.username:
                raise ValidationException("Username cannot be changed once set")
            if self.profile_repository.username_taken_by_other(username, user_id):
                raise ConflictException("Username already taken")
            updates["username"] = username

        if updates.get("favorite_genres") is None:
            updates.pop("favorite_genres", None)

        if not updates:
            return profile

        profile = self.profile_repository.update(profile, updates, conflict_message="Username already taken")
        logger.info(f"Updated profile for user {user_id}: {sorted(updates)}")
        return profile

    def get_stats(self, user_id: str) -> ProfileStats:
        if self.profile_repository.get(user_id) is None:
            raise NotFoundException("Profile not found")

        watchlist_repository = WatchlistRepository(self.db)
        follow_repository = FollowRepository(self.db)
        counts = watchlist_repository.status_counts(user_id)
        average = watchlist_repository.average_rating(user_id)

        return ProfileStats(
            total_items=sum(counts.values()),
            watched_count=sum(counts.get(status, 0) for status in WatchlistStatus.finished()),
            want_to_watch_count=counts.get(WatchlistStatus.WANT_TO_WATCH.value, 0),
            currently_watching_count=counts.get(WatchlistStatus.CURRENTLY_WATCHING.value, 0),
            dropped_count=counts.get(WatchlistStatus.DROPPED.value, 0),
            reviews_count=ReviewRepository(self.db).count(user_id=user_id),
            followers_count=follow_repository.count(following_id=user_id),
            following_count=follow_repository.count(follower_id=user_id),
            lists_count=CustomListRepository(self.db).count(user_id=user_id),
            average_rating=round(average, 2) if average is not None else None,
        )

    def search_users(self, query: Optional[str], limit: int) -> List[Profile]:
        """Substring search; an empty query lists the newest profiles"""
        term = (query or "").strip()
        if not term:
            return self.profile_repository.newest(limit)
        return self.profile_repository.search(term, limit)

    def get_profile_map(self, user_ids: Iterable[Optional[str]]) -> Dict[str, ProfileResponse]:
        """Profiles for hydrating related records, keyed by user id"""
        profiles = self.profile_repository.get_many(user_ids)
        return {
            user_id: ProfileResponse.model_validate(profile)
            for user_id, profile in profiles.items()
        }
