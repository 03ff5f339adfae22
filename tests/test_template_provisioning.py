"""
Template provisioning engine tests:
- validation order and typed errors
- business_name always synced to client_name
- FAQ de-duplication
- behavior preset defaults and lead sensitivity
- booking failsafe policy (current and legacy rows)
- barber onboarding end to end
"""
import copy
import itertools

import pytest

from core.industry_templates import INDUSTRY_TEMPLATES
from core.template_ids import get_db_template_id
from models import (
    BookingMode, BuildError, BuildErrorCode, BuildSuccess, DEFAULT_CRISIS_KEYWORDS,
    LeadDetectionSensitivity, TemplateOverrides,
)
from services.prompt_compiler import build_system_prompt_from_config
from services.template_provisioning import (
    build_client_from_template,
    merge_faqs,
    validate_template_for_provisioning,
)
from services.template_seeding import build_default_config


def make_record(industry_key: str = "barber") -> dict:
    template = INDUSTRY_TEMPLATES[industry_key]
    return {
        "id": f"row-{industry_key}",
        "template_id": get_db_template_id(industry_key),
        "name": template["name"],
        "description": template["description"],
        "bot_type": template["bot_type"],
        "icon": template["icon"],
        "default_config": build_default_config(template),
        "is_active": True,
        "display_order": 0,
    }


def build_ok(record, overrides):
    result = build_client_from_template(record, overrides)
    assert isinstance(result, BuildSuccess), getattr(result, "error", None)
    return result.data


class TestValidation:
    def test_missing_template(self):
        result = build_client_from_template(None, {"client_id": "c1", "client_name": "C"})
        assert isinstance(result, BuildError)
        assert result.success is False
        assert result.code == BuildErrorCode.MISSING_TEMPLATE

    def test_missing_template_wins_over_missing_fields(self):
        result = build_client_from_template(None, {})
        assert result.code == BuildErrorCode.MISSING_TEMPLATE

    def test_missing_client_id(self):
        result = build_client_from_template(make_record(), {"client_name": "Acme"})
        assert result.code == BuildErrorCode.MISSING_REQUIRED_FIELD
        assert "client_id" in result.error

    def test_missing_client_name(self):
        result = build_client_from_template(make_record(), {"client_id": "acme"})
        assert result.code == BuildErrorCode.MISSING_REQUIRED_FIELD
        assert "client_name" in result.error

    def test_client_fields_checked_before_default_config(self):
        record = make_record()
        record["default_config"] = None
        result = build_client_from_template(record, {"client_name": "Acme"})
        assert result.code == BuildErrorCode.MISSING_REQUIRED_FIELD

    def test_missing_default_config(self):
        record = make_record()
        record["default_config"] = None
        result = build_client_from_template(record, {"client_id": "acme", "client_name": "Acme"})
        assert result.code == BuildErrorCode.INVALID_TEMPLATE_CONFIG

    def test_unknown_booking_mode_is_returned_not_raised(self):
        record = make_record()
        record["default_config"]["booking_profile"]["mode"] = "carrier_pigeon"
        result = build_client_from_template(record, {"client_id": "acme", "client_name": "Acme"})
        assert isinstance(result, BuildError)
        assert result.code == BuildErrorCode.INVALID_TEMPLATE_CONFIG


class TestBusinessNameSync:
    def test_conflicting_profile_name_is_overwritten(self):
        data = build_ok(make_record(), {
            "client_id": "acme",
            "client_name": "Acme Barbers",
            "business_profile": {"business_name": "Totally Different LLC", "location": "Austin"},
        })
        profile = data.bot_config.business_profile
        assert profile.business_name == "Acme Barbers"
        assert profile.location == "Austin"
        assert data.client_settings_seed.business_name == "Acme Barbers"
        assert data.bot_config.name == "Acme Barbers"

    def test_any_override_key_order(self):
        items = [
            ("business_profile", {"business_name": "Wrong Name", "phone": "555-0100"}),
            ("client_name", "Right Name"),
            ("client_id", "right"),
            ("contact", {"email": "hi@right.example"}),
        ]
        for ordering in itertools.permutations(items):
            data = build_ok(make_record(), dict(ordering))
            assert data.bot_config.business_profile.business_name == "Right Name"

    def test_template_defaults_then_overrides_then_contact(self):
        data = build_ok(make_record(), {
            "client_id": "acme",
            "client_name": "Acme",
            "business_profile": {"phone": "555-0100", "services": ["Fades"]},
            "contact": {"phone": "555-0199"},
        })
        profile = data.bot_config.business_profile
        assert profile.type == "Barbershop"
        assert profile.services == ["Fades"]
        assert profile.phone == "555-0199"
        assert data.client_settings_seed.primary_phone == "555-0199"

    def test_template_services_kept_when_not_overridden(self):
        data = build_ok(make_record(), {"client_id": "acme", "client_name": "Acme"})
        assert data.bot_config.business_profile.services == INDUSTRY_TEMPLATES["barber"]["default_config"]["business_profile"]["services"]


class TestFaqMerge:
    def test_custom_faq_replaces_normalized_duplicate(self):
        merged = merge_faqs(
            [{"question": "What are your hours?", "answer": "9-5"}],
            [{"question": "What Are Your Hours?", "answer": "24/7"}],
        )
        assert len(merged) == 1
        assert merged[0].answer == "24/7"

    def test_first_seen_position_is_kept(self):
        merged = merge_faqs(
            [
                {"question": "Do you take walk-ins?", "answer": "Sometimes"},
                {"question": "Where are you?", "answer": "Main St"},
            ],
            [
                {"question": "Parking?", "answer": "Street parking"},
                {"question": "  do you   take WALK-INS", "answer": "Yes, always"},
            ],
        )
        assert [f.answer for f in merged] == ["Yes, always", "Main St", "Street parking"]

    def test_template_and_custom_faqs_in_bundle(self):
        data = build_ok(make_record(), {
            "client_id": "acme",
            "client_name": "Acme",
            "custom_faqs": [
                {"question": "How long does a haircut take?!", "answer": "20 minutes flat"},
                {"question": "Do you sell gift cards?", "answer": "Yes"},
            ],
        })
        template_count = len(INDUSTRY_TEMPLATES["barber"]["default_config"]["faqs"])
        assert len(data.faq_seed) == template_count + 1
        assert data.faq_seed[0].answer == "20 minutes flat"
        assert data.bot_config.faqs == data.faq_seed


class TestPresetDefaults:
    def test_no_preset_defaults_to_support_lead_focused(self):
        data = build_ok(make_record(), {"client_id": "acme", "client_name": "Acme"})
        settings = data.client_settings_seed
        assert settings.behavior_preset.value == "support_lead_focused"
        assert settings.lead_detection_sensitivity == LeadDetectionSensitivity.MEDIUM
        assert settings.plan.value == "free"
        assert settings.timezone == "America/New_York"
        assert settings.status == "active"

    @pytest.mark.parametrize("preset,sensitivity", [
        ("sales_focused_soft", "high"),
        ("support_only", "low"),
        ("compliance_strict", "low"),
        ("sales_heavy", "high"),
    ])
    def test_sensitivity_table(self, preset, sensitivity):
        data = build_ok(make_record(), {"client_id": "acme", "client_name": "Acme", "behavior_preset": preset})
        assert data.client_settings_seed.lead_detection_sensitivity.value == sensitivity


class TestBookingAndRules:
    def test_failsafe_from_explicit_flag(self):
        record = make_record("restaurant")
        data = build_ok(record, {"client_id": "r", "client_name": "R"})
        assert data.booking_profile_seed.mode == BookingMode.EXTERNAL
        assert data.booking_profile_seed.failsafe_enabled is True

    def test_explicit_false_flag_is_respected(self):
        record = make_record("restaurant")
        record["default_config"]["booking_profile"]["failsafe_enabled"] = False
        data = build_ok(record, {"client_id": "r", "client_name": "R"})
        assert data.booking_profile_seed.failsafe_enabled is False

    def test_legacy_booking_profile(self):
        record = make_record("dental")
        config = record["default_config"]
        config["cta_buttons"] = []
        config["disclaimer"] = None
        config["booking_profile"] = {
            "default_mode": "external",
            "failsafe": {"external_missing_url_behavior": "pivot_to_internal"},
            "ctas": [
                {"id": "book", "label": "Book Cleaning", "kind": "primary", "appointment_type_id": "cleaning"},
                {"id": "call", "label": "Call Us", "kind": "secondary"},
            ],
            "appointment_types": [{"id": "cleaning", "label": "Cleaning", "mode": "external"}],
            "disclaimers": {"text": "Legacy disclaimer"},
        }
        data = build_ok(record, {"client_id": "d", "client_name": "D"})

        booking = data.booking_profile_seed
        assert booking.mode == BookingMode.EXTERNAL
        assert booking.failsafe_enabled is True
        assert booking.appointment_types[0].id == "cleaning"

        widget = data.widget_settings_seed
        assert [c.id for c in widget.cta_buttons] == ["book", "call"]
        assert widget.cta_buttons[0].is_primary is True
        assert widget.cta_buttons[0].prompt == "I'd like to book cleaning"
        assert widget.cta_buttons[1].prompt == ""
        assert widget.disclaimer == "Legacy disclaimer"

    def test_legacy_policy_without_pivot_is_off(self):
        record = make_record("dental")
        record["default_config"]["booking_profile"] = {
            "default_mode": "external",
            "failsafe": {"external_missing_url_behavior": "show_error"},
        }
        data = build_ok(record, {"client_id": "d", "client_name": "D"})
        assert data.booking_profile_seed.failsafe_enabled is False

    def test_no_booking_profile_is_internal_failsafe_on(self):
        record = make_record("auto")
        del record["default_config"]["booking_profile"]
        data = build_ok(record, {"client_id": "a", "client_name": "A"})
        assert data.booking_profile_seed.mode == BookingMode.INTERNAL
        assert data.booking_profile_seed.failsafe_enabled is True
        assert data.bot_config.automations.booking_capture.mode == BookingMode.INTERNAL

    def test_default_crisis_keywords_without_response_template(self):
        data = build_ok(make_record("barber"), {"client_id": "a", "client_name": "A"})
        crisis = data.bot_config.rules.crisis_handling
        assert crisis.keywords == DEFAULT_CRISIS_KEYWORDS
        assert crisis.response_template is None

    def test_template_crisis_keywords_are_kept(self):
        data = build_ok(make_record("sober_living"), {"client_id": "s", "client_name": "S"})
        assert "relapse" in data.bot_config.rules.crisis_handling.keywords

    def test_widget_defaults(self):
        record = make_record()
        record["default_config"]["theme"] = {}
        data = build_ok(record, {"client_id": "a", "client_name": "A"})
        assert data.widget_settings_seed.primary_color == "#00E5CC"
        assert data.widget_settings_seed.welcome_message == "Hi! How can I help you today?"
        assert data.widget_settings_seed.position == "bottom-right"
        assert data.widget_settings_seed.theme == "auto"

    def test_personality_defaults(self):
        record = make_record()
        record["default_config"]["personality"] = {}
        data = build_ok(record, {"client_id": "a", "client_name": "A"})
        assert data.bot_config.personality.tone == "friendly"
        assert data.bot_config.personality.formality == 50


def test_inputs_are_not_mutated():
    record = make_record()
    overrides = {
        "client_id": "acme",
        "client_name": "Acme",
        "business_profile": {"business_name": "Other"},
        "custom_faqs": [{"question": "Q?", "answer": "A"}],
    }
    record_before = copy.deepcopy(record)
    overrides_before = copy.deepcopy(overrides)

    build_ok(record, overrides)

    assert record == record_before
    assert overrides == overrides_before


def test_accepts_typed_overrides():
    overrides = TemplateOverrides(client_id="acme", client_name="Acme", bot_id="acme_web")
    data = build_ok(make_record(), overrides)
    assert data.bot_config.bot_id == "acme_web"


def test_barber_onboarding_end_to_end():
    data = build_ok(make_record("barber"), {
        "client_id": "acme_barber",
        "client_name": "Acme Barbers",
        "external_booking_url": "https://square.site/acme",
    })

    bot = data.bot_config
    assert bot.bot_id == "acme_barber_main"
    assert bot.business_profile.business_name == "Acme Barbers"
    assert bot.business_profile.type == "Barbershop"
    assert bot.metadata.cloned_from == "barber_template"
    assert bot.metadata.industry_template == "barber_template"
    assert bot.metadata.onboarding_status.value == "draft"
    assert bot.metadata.is_demo is False
    assert bot.metadata.version == "2.0"
    assert bot.automations.booking_capture.enabled is True
    assert bot.automations.booking_capture.mode == BookingMode.EXTERNAL
    assert bot.automations.booking_capture.external_url == "https://square.site/acme"

    assert data.booking_profile_seed.mode == BookingMode.EXTERNAL
    assert data.booking_profile_seed.external_url == "https://square.site/acme"
    assert data.booking_profile_seed.failsafe_enabled is True

    assert data.widget_settings_seed.primary_color == "#8B5CF6"
    assert len(data.widget_settings_seed.cta_buttons) == 6
    assert data.client_settings_seed.behavior_preset.value == "support_lead_focused"
    assert data.client_settings_seed.lead_detection_sensitivity.value == "medium"

    prompt = build_system_prompt_from_config(bot, data.client_settings_seed.behavior_preset)
    assert "https://square.site/acme" in prompt
    assert "REDIRECT ONLY" in prompt
    assert "LEAD CAPTURE ONLY" not in prompt
    for phrase in ("I've booked", "booking is confirmed", "reserved your"):
        assert phrase not in prompt


class TestValidateTemplate:
    def test_missing_record(self):
        result = validate_template_for_provisioning(None)
        assert result.valid is False
        assert result.errors == ["Template not found"]

    def test_catalog_record_is_valid(self):
        result = validate_template_for_provisioning(make_record("hotel"))
        assert result.valid is True
        assert result.errors == []

    def test_flags_every_missing_field(self):
        record = make_record()
        record["template_id"] = None
        record["bot_type"] = None
        record["default_config"] = {"faqs": []}
        result = validate_template_for_provisioning(record)
        assert result.valid is False
        assert result.errors == [
            "Template missing template_id",
            "Template missing business_profile in default_config",
            "Template missing system_prompt in default_config",
            "Template missing bot_type",
        ]

    def test_flags_missing_default_config(self):
        record = make_record()
        record["default_config"] = None
        result = validate_template_for_provisioning(record)
        assert result.errors == ["Template missing default_config"]
