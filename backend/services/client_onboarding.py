"""
Client Onboarding

Loads a template row, runs the provisioning engine and writes the resulting
bot config and seed rows. Writes are upserts keyed on client/bot id, so
re-provisioning the same client replaces its rows instead of duplicating them.
"""
import logging
from typing import Optional, Union

from models import BotConfig, BuildError, BuildErrorCode, BuildClientResult, TemplateOverrides, utc_now
from services.template_provisioning import build_client_from_template
from core import database as core_database
from core.database import BOT_TEMPLATES, BOTS, CLIENT_SETTINGS, WIDGET_SETTINGS, BOOKING_PROFILES, BOT_FAQS

logger = logging.getLogger(__name__)


def _database(database=None):
    if database is not None:
        return database
    return core_database.db


async def load_template(template_id: str, database=None) -> Optional[dict]:
    db = _database(database)
    return await db[BOT_TEMPLATES].find_one({"template_id": template_id, "is_active": True}, {"_id": 0})


class ProvisioningWriteError(Exception):
    """A provisioning write failed. Carries the collection that rejected it."""

    def __init__(self, client_id: str, collection: str, cause: Exception):
        self.client_id = client_id
        self.collection = collection
        super().__init__(f"Failed writing {collection} for {client_id}: {cause}")


async def provision_client_from_template(
    template_id: str,
    overrides: Union[TemplateOverrides, dict],
    database=None,
) -> BuildClientResult:
    """
    Build a client from a persisted template and persist every seed row.

    The bot row is written last, so a failed write never leaves a bot without
    its settings, widget, booking or FAQ rows. Write failures raise
    ProvisioningWriteError.
    """
    db = _database(database)
    template_row = await load_template(template_id, db)
    result = build_client_from_template(template_row, overrides)
    if isinstance(result, BuildError):
        if result.code == BuildErrorCode.MISSING_TEMPLATE:
            result = BuildError(error=f"Template '{template_id}' not found in database", code=result.code)
        logger.warning(f"Provisioning from {template_id} failed: {result.error}")
        return result

    bundle = result.data
    client_id = bundle.bot_config.client_id
    bot_id = bundle.bot_config.bot_id
    now = utc_now().isoformat()

    settings_doc = bundle.client_settings_seed.model_dump(mode="json")
    settings_doc["updated_at"] = now

    widget_doc = bundle.widget_settings_seed.model_dump(mode="json")
    widget_doc.update({"client_id": client_id, "bot_id": bot_id, "updated_at": now})

    booking_doc = bundle.booking_profile_seed.model_dump(mode="json")
    booking_doc.update({"client_id": client_id, "bot_id": bot_id, "updated_at": now})

    faq_doc = {
        "client_id": client_id,
        "bot_id": bot_id,
        "faqs": [faq.model_dump() for faq in bundle.faq_seed],
        "updated_at": now,
    }

    bot_doc = bundle.bot_config.model_dump(mode="json")
    bot_doc["updated_at"] = now

    writes = [
        (CLIENT_SETTINGS, {"client_id": client_id}, settings_doc),
        (WIDGET_SETTINGS, {"bot_id": bot_id}, widget_doc),
        (BOOKING_PROFILES, {"bot_id": bot_id}, booking_doc),
        (BOT_FAQS, {"bot_id": bot_id}, faq_doc),
        (BOTS, {"bot_id": bot_id}, bot_doc),
    ]
    for collection, key, doc in writes:
        try:
            await db[collection].update_one(key, {"$set": doc}, upsert=True)
        except Exception as e:
            logger.error(f"Provisioning {client_id} from {template_id}: {collection} write failed: {e}")
            raise ProvisioningWriteError(client_id, collection, e) from e

    logger.info(f"Provisioned {client_id} ({bot_id}) from {template_id}")
    return result


async def load_bot_config(bot_id: str, database=None) -> Optional[BotConfig]:
    db = _database(database)
    doc = await db[BOTS].find_one({"bot_id": bot_id}, {"_id": 0})
    if not doc:
        return None
    return BotConfig.model_validate(doc)


async def load_client_settings(client_id: str, database=None) -> Optional[dict]:
    db = _database(database)
    return await db[CLIENT_SETTINGS].find_one({"client_id": client_id}, {"_id": 0})
