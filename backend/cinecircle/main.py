import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from cinecircle.core.config import Settings, get_settings
from cinecircle.core.tmdb_service import TMDBServiceFactory
from cinecircle.db import Database
from cinecircle.routers import (
    activities, comments, follows, health, lists, media, notifications,
    profiles, recommendations, reviews, users, watchlist
)
from cinecircle.services.media_service import MediaService

logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

def create_media_service(settings: Settings) -> MediaService:
    client = TMDBServiceFactory.create_client(settings)
    return MediaService(*TMDBServiceFactory.create_catalogs(client))

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    media_service: Optional[MediaService] = None
) -> FastAPI:
    """Build the API with its database handle and metadata gateway"""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title="CineCircle API",
        description="Social watchlist: track, review, follow and recommend movies and TV shows",
        version="1.0.0",
        debug=settings.DEBUG
    )

    origins_env = settings.CORS_ALLOW_ORIGINS or ""
    origins = [o.strip() for o in origins_env.split(",") if o.strip()] or DEFAULT_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(profiles.router)
    app.include_router(users.router)
    app.include_router(watchlist.router)
    app.include_router(reviews.router)
    app.include_router(comments.router)
    app.include_router(follows.router)
    app.include_router(lists.router)
    app.include_router(activities.router)
    app.include_router(notifications.router)
    app.include_router(recommendations.router)
    app.include_router(media.router)

    app.state.settings = settings
    app.state.database = database or Database(settings.DATABASE_URL, {"pool_pre_ping": True})
    app.state.media_service = media_service or create_media_service(settings)

    if settings.AUTO_CREATE_TABLES:
        app.state.database.create_all()
        logger.info("Database tables created")

    logger.info(f"CineCircle API ready ({settings.ENVIRONMENT})")
    return app

app = create_app()
