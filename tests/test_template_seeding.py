"""Template seeding tests against the in-memory collection"""
import asyncio

from core.industry_templates import INDUSTRY_TEMPLATES
from core.template_ids import INDUSTRY_TEMPLATE_COUNT, get_db_template_id
from models import SeedAction
from services.template_seeding import build_default_config, ensure_templates_seeded, seed_all_templates


class TestBuildDefaultConfig:
    def test_shape(self):
        config = build_default_config(INDUSTRY_TEMPLATES["barber"])
        assert set(config) == {
            "business_profile", "system_prompt", "faqs", "rules", "automations", "theme",
            "personality", "booking_profile", "cta_buttons", "disclaimer", "services_catalog",
        }
        assert config["system_prompt"] == INDUSTRY_TEMPLATES["barber"]["default_config"]["system_prompt_intro"]
        assert len(config["services_catalog"]) == 6
        assert config["rules"] == {}
        assert config["automations"] == {}

    def test_does_not_alias_catalog(self):
        config = build_default_config(INDUSTRY_TEMPLATES["restaurant"])
        config["faqs"].append({"question": "x", "answer": "y"})
        config["booking_profile"]["mode"] = "internal"
        assert len(INDUSTRY_TEMPLATES["restaurant"]["default_config"]["faqs"]) == 3
        assert INDUSTRY_TEMPLATES["restaurant"]["booking_profile"]["mode"] == "external"

    def test_services_catalog_defaults_to_empty(self):
        assert build_default_config(INDUSTRY_TEMPLATES["hotel"])["services_catalog"] == []

    def test_recovery_rules_carried(self):
        rules = build_default_config(INDUSTRY_TEMPLATES["sober_living"])["rules"]
        assert "overdose" in rules["crisis_handling"]["keywords"]


def test_seed_twice_inserts_then_updates(fake_collection):
    first = asyncio.run(seed_all_templates(collection=fake_collection))
    assert len(first) == INDUSTRY_TEMPLATE_COUNT
    assert all(r.action == SeedAction.INSERTED for r in first)

    second = asyncio.run(seed_all_templates(collection=fake_collection))
    assert all(r.action == SeedAction.UPDATED for r in second)

    template_ids = [doc["template_id"] for doc in fake_collection.docs]
    assert len(template_ids) == INDUSTRY_TEMPLATE_COUNT
    assert len(set(template_ids)) == INDUSTRY_TEMPLATE_COUNT


def test_seeded_rows(fake_collection):
    asyncio.run(seed_all_templates(collection=fake_collection))
    rows = {doc["template_id"]: doc for doc in fake_collection.docs}

    auto = rows["auto_shop_template"]
    assert auto["bot_type"] == "auto"
    assert auto["is_active"] is True
    assert auto["display_order"] == list(INDUSTRY_TEMPLATES).index("auto")
    assert auto["id"]
    assert auto["created_at"] == auto["updated_at"]
    assert rows["sober_living_template"]["display_order"] == 0


def test_update_restores_catalog_values(fake_collection):
    asyncio.run(seed_all_templates(collection=fake_collection))
    row = next(d for d in fake_collection.docs if d["template_id"] == "gym_template")
    row["name"] = "Stale name"
    row["is_active"] = False
    original_id = row["id"]

    asyncio.run(seed_all_templates(collection=fake_collection))
    row = next(d for d in fake_collection.docs if d["template_id"] == "gym_template")
    assert row["name"] == INDUSTRY_TEMPLATES["gym"]["name"]
    assert row["is_active"] is True
    assert row["id"] == original_id


def test_orphan_rows_are_left_alone(fake_collection):
    fake_collection.docs.append({"template_id": "florist_template", "is_active": True})
    asyncio.run(seed_all_templates(collection=fake_collection))
    assert any(d["template_id"] == "florist_template" for d in fake_collection.docs)


def test_per_template_errors_do_not_stop_batch(failing_collection):
    results = asyncio.run(seed_all_templates(collection=failing_collection))
    assert len(results) == INDUSTRY_TEMPLATE_COUNT
    assert all(r.action == SeedAction.ERROR for r in results)
    assert results[0].error == "database unavailable"
    assert results[3].template_id == get_db_template_id("auto")


class TestEnsureTemplatesSeeded:
    def test_empty_store(self, fake_collection):
        result = asyncio.run(ensure_templates_seeded(collection=fake_collection))
        assert result.skipped is False
        assert result.seeded == INDUSTRY_TEMPLATE_COUNT
        assert result.updated == 0
        assert result.error is None
        assert len(result.results) == INDUSTRY_TEMPLATE_COUNT

    def test_partial_store(self, fake_collection):
        asyncio.run(seed_all_templates(collection=fake_collection))
        fake_collection.docs = fake_collection.docs[:5]
        result = asyncio.run(ensure_templates_seeded(collection=fake_collection))
        assert result.skipped is False
        assert result.seeded == INDUSTRY_TEMPLATE_COUNT - 5
        assert result.updated == 5

    def test_full_store_still_propagates_edits(self, fake_collection):
        asyncio.run(seed_all_templates(collection=fake_collection))
        fake_collection.docs[0]["name"] = "Edited"
        result = asyncio.run(ensure_templates_seeded(collection=fake_collection))
        assert result.skipped is True
        assert result.seeded == 0
        assert result.updated == INDUSTRY_TEMPLATE_COUNT
        assert result.error is None
        assert result.results == []
        assert fake_collection.docs[0]["name"] == INDUSTRY_TEMPLATES["sober_living"]["name"]

    def test_full_store_reports_update_errors(self, fake_collection, monkeypatch):
        asyncio.run(seed_all_templates(collection=fake_collection))

        async def rejected_update(query, update, upsert=False):
            raise RuntimeError("write conflict")

        monkeypatch.setattr(fake_collection, "update_one", rejected_update)
        result = asyncio.run(ensure_templates_seeded(collection=fake_collection))
        assert result.skipped is True
        assert result.seeded == 0
        assert result.updated == 0
        assert len(result.results) == INDUSTRY_TEMPLATE_COUNT
        assert all(r.action == SeedAction.ERROR for r in result.results)
        assert result.error.startswith("sober_living: write conflict")
        assert result.error.count("write conflict") == INDUSTRY_TEMPLATE_COUNT

    def test_full_store_returns_only_failed_entries(self, fake_collection, monkeypatch):
        asyncio.run(seed_all_templates(collection=fake_collection))
        original_update = fake_collection.update_one

        async def flaky_update(query, update, upsert=False):
            if query["template_id"] == "hotel_template":
                raise RuntimeError("write conflict")
            await original_update(query, update, upsert=upsert)

        monkeypatch.setattr(fake_collection, "update_one", flaky_update)
        result = asyncio.run(ensure_templates_seeded(collection=fake_collection))
        assert result.updated == INDUSTRY_TEMPLATE_COUNT - 1
        assert result.error == "hotel: write conflict"
        assert [r.template_id for r in result.results] == ["hotel_template"]

    def test_never_raises(self, failing_collection):
        result = asyncio.run(ensure_templates_seeded(collection=failing_collection))
        assert result.seeded == 0
        assert result.skipped is False
        assert "database unavailable" in result.error

    def test_per_template_errors_are_joined(self, fake_collection, monkeypatch):
        original_insert = fake_collection.insert_one

        async def flaky_insert(doc):
            if doc["template_id"] == "tattoo_template":
                raise RuntimeError("write conflict")
            await original_insert(doc)

        monkeypatch.setattr(fake_collection, "insert_one", flaky_insert)
        result = asyncio.run(ensure_templates_seeded(collection=fake_collection))
        assert result.seeded == INDUSTRY_TEMPLATE_COUNT - 1
        assert result.error == "tattoo: write conflict"
