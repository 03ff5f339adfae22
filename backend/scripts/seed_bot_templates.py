#!/usr/bin/env python3
"""
Seed Bot Templates

Upserts every industry catalog template into the bot_templates collection.
Safe to run repeatedly. Exits 1 if any template failed to seed.

Usage:
    python -m scripts.seed_bot_templates
"""
import argparse
import asyncio
import logging
import sys

from core.app_setup import configure_logging
from core.template_ids import INDUSTRY_TEMPLATE_COUNT
from models import SeedAction
from services.template_seeding import seed_all_templates

logger = logging.getLogger(__name__)


async def run(quiet: bool = False) -> int:
    print(f"Seeding {INDUSTRY_TEMPLATE_COUNT} industry templates...")
    results = await seed_all_templates(verbose=not quiet)

    inserted = sum(1 for r in results if r.action == SeedAction.INSERTED)
    updated = sum(1 for r in results if r.action == SeedAction.UPDATED)
    errors = [r for r in results if r.action == SeedAction.ERROR]

    print(f"\nInserted: {inserted}  Updated: {updated}  Errors: {len(errors)}")
    for r in errors:
        print(f"  ✗ {r.industry_key} -> {r.template_id}: {r.error}")

    return 1 if errors else 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed industry templates into bot_templates")
    parser.add_argument("--quiet", action="store_true", help="only print the summary")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        return asyncio.run(run(quiet=args.quiet))
    except Exception as e:
        logger.error(f"Template seeding failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
