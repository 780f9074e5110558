from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, UniqueConstraint
from cinecircle.db import Base, utcnow

class WatchlistItem(Base):
    __tablename__ = "watchlist_items"
    __table_args__ = (
        UniqueConstraint("user_id", "tmdb_id", "media_type", name="uq_watchlist_owner_media"),
    )

    # id is "{tmdb_id}-{media_type}", unique per owner
    id = Column(String, primary_key=True)
    user_id = Column(String, primary_key=True, index=True)
    tmdb_id = Column(Integer, nullable=False)
    media_type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    overview = Column(Text, nullable=True)
    poster_path = Column(String, nullable=True)
    release_date = Column(String, nullable=True)
    first_air_date = Column(String, nullable=True)
    status = Column(String, nullable=False, default="want_to_watch")
    rating = Column(Integer, nullable=True)
    watched_date = Column(String, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    priority = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    added_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    @staticmethod
    def make_id(tmdb_id: int, media_type: str) -> str:
        return f"{tmdb_id}-{media_type}"
