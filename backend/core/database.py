"""MongoDB async database connection - single source of truth"""
from motor.motor_asyncio import AsyncIOMotorClient
from core.config import MONGO_URL, DB_NAME

# Collections
BOT_TEMPLATES = "bot_templates"
BOTS = "bots"
CLIENT_SETTINGS = "client_settings"
WIDGET_SETTINGS = "widget_settings"
BOOKING_PROFILES = "booking_profiles"
BOT_FAQS = "bot_faqs"

client: AsyncIOMotorClient = AsyncIOMotorClient(MONGO_URL)
db = client[DB_NAME]
