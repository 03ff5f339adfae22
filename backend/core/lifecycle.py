"""Lifecycle helpers to keep server.py thinner."""
import logging

from core.config import SEED_TEMPLATES_ON_STARTUP

logger = logging.getLogger(__name__)


async def seed_templates_on_startup():
    """Boot-time template seeding. Never blocks startup on failure."""
    if not SEED_TEMPLATES_ON_STARTUP:
        logger.info("[templates] boot-time seeding disabled")
        return None

    from services.template_seeding import ensure_templates_seeded

    result = await ensure_templates_seeded()
    if result.error:
        logger.warning(f"[templates] boot-time seeding finished with errors: {result.error}")
    return result


async def shutdown_resources(db_client):
    """Close the DB client."""
    try:
        db_client.close()
        logger.info("MongoDB connection closed")
    except Exception as exc:
        logger.warning(f"Error closing MongoDB client: {exc}")
