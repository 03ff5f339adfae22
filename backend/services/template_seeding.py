"""
Template Seeding Service

Idempotent upsert of the industry catalog into the bot_templates collection.
Runs at boot (ensure_templates_seeded) and from the seed CLI (seed_all_templates).
Rows are matched on template_id; rows not in the catalog are left alone.
"""
import copy
import logging
from typing import Optional

from models import BotTemplate, EnsureTemplatesResult, SeedAction, SeedResult, utc_now
from core.industry_templates import INDUSTRY_TEMPLATES
from core.template_ids import INDUSTRY_TEMPLATE_COUNT, get_all_industry_keys, get_db_template_id
from core import database as core_database
from core.database import BOT_TEMPLATES

logger = logging.getLogger(__name__)


def _templates_collection(collection=None):
    if collection is not None:
        return collection
    return core_database.db[BOT_TEMPLATES]


def build_default_config(template: dict) -> dict:
    """Persisted default_config for a catalog entry. Deep copied so rows never share catalog data."""
    defaults = template["default_config"]
    return copy.deepcopy({
        "business_profile": defaults["business_profile"],
        "system_prompt": defaults["system_prompt_intro"],
        "faqs": defaults["faqs"],
        "rules": defaults.get("rules") or {},
        "automations": {},
        "theme": defaults["theme"],
        "personality": defaults["personality"],
        "booking_profile": template["booking_profile"],
        "cta_buttons": template["cta_buttons"],
        "disclaimer": template["disclaimer"],
        "services_catalog": template.get("services_catalog") or [],
    })


async def seed_all_templates(verbose: bool = False, collection=None) -> list[SeedResult]:
    """
    Insert or update every catalog template, in catalog order.

    A failure on one template is recorded and the batch moves on.
    """
    templates = _templates_collection(collection)
    industry_keys = get_all_industry_keys()
    results: list[SeedResult] = []

    for display_order, industry_key in enumerate(industry_keys):
        template_id = get_db_template_id(industry_key)
        template = INDUSTRY_TEMPLATES.get(industry_key)

        if not template:
            results.append(SeedResult(
                industry_key=industry_key,
                template_id=template_id,
                action=SeedAction.ERROR,
                error="Template not found in catalog",
            ))
            continue

        try:
            existing = await templates.find_one({"template_id": template_id}, {"_id": 0, "id": 1})
            now = utc_now().isoformat()

            if existing:
                await templates.update_one(
                    {"template_id": template_id},
                    {"$set": {
                        "name": template["name"],
                        "description": template["description"],
                        "bot_type": template["bot_type"],
                        "icon": template["icon"],
                        "default_config": build_default_config(template),
                        "is_active": True,
                        "updated_at": now,
                    }}
                )
                results.append(SeedResult(industry_key=industry_key, template_id=template_id, action=SeedAction.UPDATED))
                if verbose:
                    logger.info(f"[templates] updated: {industry_key} -> {template_id}")
            else:
                row = BotTemplate(
                    template_id=template_id,
                    name=template["name"],
                    description=template["description"],
                    bot_type=template["bot_type"],
                    icon=template["icon"],
                    default_config=build_default_config(template),
                    is_active=True,
                    display_order=display_order,
                    created_at=now,
                    updated_at=now,
                )
                await templates.insert_one(row.model_dump())
                results.append(SeedResult(industry_key=industry_key, template_id=template_id, action=SeedAction.INSERTED))
                if verbose:
                    logger.info(f"[templates] inserted: {industry_key} -> {template_id}")
        except Exception as e:
            logger.error(f"[templates] error seeding {industry_key} -> {template_id}: {e}")
            results.append(SeedResult(
                industry_key=industry_key,
                template_id=template_id,
                action=SeedAction.ERROR,
                error=str(e),
            ))

    return results


def _join_errors(errors: list[SeedResult]) -> Optional[str]:
    if not errors:
        return None
    return "; ".join(f"{r.industry_key}: {r.error}" for r in errors)


async def ensure_templates_seeded(collection=None) -> EnsureTemplatesResult:
    """
    Boot-time entry point. Always propagates catalog edits, never raises.

    When every template is already present the batch still runs, but the result
    reports skipped=True with the update count. Only failed entries are returned
    in results for that case.
    """
    try:
        templates = _templates_collection(collection)
        current_count = await templates.count_documents({"is_active": True})

        if current_count >= INDUSTRY_TEMPLATE_COUNT:
            logger.info(f"[templates] updating existing templates (count={current_count})")
            results = await seed_all_templates(verbose=False, collection=templates)
            updated = sum(1 for r in results if r.action == SeedAction.UPDATED)
            errors = [r for r in results if r.action == SeedAction.ERROR]
            error_text = _join_errors(errors)
            if error_text:
                logger.error(f"[templates] update errors: {error_text}")
            logger.info(f"[templates] updated {updated} templates with latest config")
            return EnsureTemplatesResult(
                seeded=0,
                updated=updated,
                skipped=True,
                error=error_text,
                results=errors,
            )

        results = await seed_all_templates(verbose=False, collection=templates)
        inserted = [r for r in results if r.action == SeedAction.INSERTED]
        updated = [r for r in results if r.action == SeedAction.UPDATED]
        error_text = _join_errors([r for r in results if r.action == SeedAction.ERROR])

        if error_text:
            logger.error(f"[templates] seeding errors: {error_text}")
        else:
            logger.info(f"[templates] seeded {len(inserted)} templates, updated {len(updated)}")

        return EnsureTemplatesResult(
            seeded=len(inserted),
            updated=len(updated),
            skipped=False,
            error=error_text,
            results=results,
        )
    except Exception as e:
        logger.error(f"[templates] seeding failed: {e}")
        return EnsureTemplatesResult(error=str(e))
