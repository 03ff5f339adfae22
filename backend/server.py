"""
Assistant Provisioning Backend - Main FastAPI Application
Industry templates, client provisioning and per-turn prompt compilation
"""
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, APIRouter

from core.config import validate_settings
from core.app_setup import configure_cors, configure_logging
from core.database import client
from core.lifecycle import seed_templates_on_startup, shutdown_resources
from routes import templates_router

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)

# Settings validation (fail-fast)
validate_settings()

# Create the main app
app = FastAPI(title="Assistant Provisioning API", version="1.0.0")

# Create routers
api_router = APIRouter(prefix="/api")
v1_router = APIRouter(prefix="/v1")


@api_router.get("/")
async def root():
    return {"message": "Assistant Provisioning API v1.0.0", "status": "healthy"}


@api_router.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


# Include routers
v1_router.include_router(templates_router)
api_router.include_router(v1_router)
app.include_router(api_router)

configure_cors(app)


@app.on_event("startup")
async def startup_event():
    """Seed industry templates into bot_templates"""
    try:
        await seed_templates_on_startup()
    except Exception as e:
        logger.error(f"Template seeding on startup failed: {e}")


@app.on_event("shutdown")
async def shutdown_db_client():
    await shutdown_resources(client)
