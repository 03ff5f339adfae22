"""Industry template routes - catalog, persisted templates and client provisioning"""
import logging

from fastapi import APIRouter, HTTPException

from core import database as core_database
from core.database import BOT_TEMPLATES
from core.industry_templates import get_template, list_templates
from core.utils import serialize_docs
from models import BuildError, BuildErrorCode, TemplateOverrides
from services.client_onboarding import ProvisioningWriteError, load_template, provision_client_from_template
from services.template_provisioning import validate_template_for_provisioning

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("/industries")
async def get_industry_templates():
    """List all available industry templates (summary view for dropdowns)"""
    return list_templates()


@router.get("/industries/{industry}")
async def get_industry_template(industry: str):
    """Get full catalog template for a specific industry"""
    template = get_template(industry)
    if not template:
        raise HTTPException(status_code=404, detail=f"Industry template '{industry}' not found")
    return template


@router.get("")
async def get_persisted_templates():
    """Active templates from the bot_templates collection, in display order"""
    db = core_database.db
    templates = await db[BOT_TEMPLATES].find(
        {"is_active": True}, {"_id": 0}
    ).sort("display_order", 1).to_list(100)
    return serialize_docs(templates)


@router.get("/{template_id}/validate")
async def validate_template(template_id: str):
    """Pre-flight check that a persisted template can be provisioned"""
    template_row = await load_template(template_id)
    validation = validate_template_for_provisioning(template_row)
    return {"template_id": template_id, **validation.model_dump()}


@router.post("/{template_id}/provision")
async def provision_client(template_id: str, overrides: TemplateOverrides):
    """Create a client's bot config and seed rows from a persisted template"""
    try:
        result = await provision_client_from_template(template_id, overrides)
    except ProvisioningWriteError as e:
        raise HTTPException(status_code=503, detail={"code": "WRITE_FAILED", "error": str(e)})
    if isinstance(result, BuildError):
        status_code = 404 if result.code == BuildErrorCode.MISSING_TEMPLATE else 400
        raise HTTPException(
            status_code=status_code,
            detail={"code": result.code.value, "error": result.error},
        )

    bundle = result.data
    logger.info(f"Provisioned client {bundle.bot_config.client_id} from {template_id}")
    return {"success": True, "data": bundle.model_dump(mode="json")}
