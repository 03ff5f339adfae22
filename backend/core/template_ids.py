"""
Mapping between industry catalog keys and persisted bot_templates.template_id values.

All persisted ids carry the "_template" suffix. "auto" is stored under its
legacy name "auto_shop_template".
"""
from typing import Optional

from core.industry_templates import INDUSTRY_TEMPLATES

TEMPLATE_ID_SUFFIX = "_template"

# Catalog key -> persisted id, for rows created before the suffix rule
LEGACY_TEMPLATE_IDS = {
    "auto": "auto_shop_template",
}

INDUSTRY_TEMPLATE_COUNT: int = len(INDUSTRY_TEMPLATES)


def get_db_template_id(industry_key: str) -> str:
    if industry_key in LEGACY_TEMPLATE_IDS:
        return LEGACY_TEMPLATE_IDS[industry_key]
    return f"{industry_key}{TEMPLATE_ID_SUFFIX}"


def get_industry_key(db_template_id: str) -> Optional[str]:
    """Reverse lookup; returns None for ids that don't belong to the catalog"""
    for key, legacy_id in LEGACY_TEMPLATE_IDS.items():
        if db_template_id == legacy_id:
            return key

    if not db_template_id.endswith(TEMPLATE_ID_SUFFIX):
        return None
    key = db_template_id[:-len(TEMPLATE_ID_SUFFIX)]
    return key if key in INDUSTRY_TEMPLATES else None


def get_all_industry_keys() -> list[str]:
    return list(INDUSTRY_TEMPLATES.keys())


def get_template_id_map() -> dict[str, str]:
    return {key: get_db_template_id(key) for key in get_all_industry_keys()}
