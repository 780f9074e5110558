import logging
from cinecircle.core.config import get_settings
from cinecircle.db import Database

logger = logging.getLogger(__name__)

def main():
    """Create every table for the configured database"""
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    database = Database(settings.DATABASE_URL)
    try:
        database.create_all()
        logger.info("All tables created")
    finally:
        database.dispose()

if __name__ == "__main__":
    main()
