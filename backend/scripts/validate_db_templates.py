#!/usr/bin/env python3
"""
Validate DB Templates

Deployment gate: every catalog template must exist in bot_templates, be active
and pass provisioning validation. Persisted rows with no catalog entry are
reported as drift warnings but don't fail the check.

Exit codes:
    0 - all templates present and valid
    1 - missing/inactive/invalid templates, or the database is unreachable
"""
import argparse
import asyncio
import logging
import sys

from core import database as core_database
from core.app_setup import configure_logging
from core.database import BOT_TEMPLATES
from core.template_ids import get_industry_key, get_template_id_map
from services.template_provisioning import validate_template_for_provisioning

logger = logging.getLogger(__name__)


async def check_templates(collection=None) -> dict:
    """Compare the catalog with persisted rows. Returns a report dict."""
    templates = collection if collection is not None else core_database.db[BOT_TEMPLATES]
    rows = await templates.find({}, {"_id": 0}).to_list(1000)
    rows_by_id = {row.get("template_id"): row for row in rows}

    report = {"valid": [], "missing": [], "inactive": [], "invalid": {}, "orphaned": []}

    for industry_key, template_id in get_template_id_map().items():
        row = rows_by_id.get(template_id)
        if row is None:
            report["missing"].append(template_id)
            continue
        if not row.get("is_active"):
            report["inactive"].append(template_id)
            continue
        validation = validate_template_for_provisioning(row)
        if validation.valid:
            report["valid"].append(template_id)
        else:
            report["invalid"][template_id] = validation.errors

    report["orphaned"] = sorted(
        template_id for template_id in rows_by_id
        if template_id and get_industry_key(template_id) is None
    )
    return report


def print_report(report: dict) -> None:
    print(f"Valid: {len(report['valid'])}")
    for template_id in report["missing"]:
        print(f"  ✗ missing: {template_id}")
    for template_id in report["inactive"]:
        print(f"  ✗ inactive: {template_id}")
    for template_id, errors in report["invalid"].items():
        print(f"  ✗ invalid: {template_id}: {'; '.join(errors)}")
    for template_id in report["orphaned"]:
        print(f"  ! orphaned (not in catalog): {template_id}")


def report_failed(report: dict) -> bool:
    return bool(report["missing"] or report["inactive"] or report["invalid"])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate persisted bot templates against the catalog")
    parser.parse_args(argv)

    configure_logging()
    try:
        report = asyncio.run(check_templates())
    except Exception as e:
        logger.error(f"Could not read bot_templates: {e}")
        return 1

    print_report(report)
    return 1 if report_failed(report) else 0


if __name__ == "__main__":
    sys.exit(main())
