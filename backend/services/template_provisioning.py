"""
Template Provisioning Engine

The one place a persisted bot_templates row plus client overrides is turned into
a bot configuration and the seed rows that go with it (client settings, widget
settings, booking profile, FAQ list).

Guarantees:
    - business_profile.business_name always equals the client name
    - FAQs are de-duplicated by normalized question; custom FAQs win
    - booking failsafe comes from the template policy, never defaults to off
    - failures are returned as BuildError values, never raised
    - inputs are never mutated
"""
import copy
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from models import (
    AppointmentTypeSeed, AutomationConfig, BehaviorPreset, BookingCapture, BookingMode,
    BookingProfileSeed, BotConfig, BotMetadata, BotRules, BotTemplate, BuildClientResult,
    BuildError, BuildErrorCode, BuildResult, BuildSuccess, BusinessProfile, ClientSettingsSeed,
    CrisisHandling, CtaButton, DEFAULT_BEHAVIOR_PRESET, DEFAULT_CRISIS_KEYWORDS,
    DEFAULT_TIMEZONE, Faq, LeadDetectionSensitivity, OnboardingStatus, Personality, Plan,
    TemplateOverrides, TemplateValidation, WidgetSettingsSeed, utc_now,
)
from core.utils import normalize_faq_question

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY_COLOR = "#00E5CC"
DEFAULT_WELCOME_MESSAGE = "Hi! How can I help you today?"
DEFAULT_TONE = "friendly"
DEFAULT_FORMALITY = 50

LEAD_SENSITIVITY_BY_PRESET = {
    BehaviorPreset.SUPPORT_LEAD_FOCUSED: LeadDetectionSensitivity.MEDIUM,
    BehaviorPreset.SALES_FOCUSED_SOFT: LeadDetectionSensitivity.HIGH,
    BehaviorPreset.SUPPORT_ONLY: LeadDetectionSensitivity.LOW,
    BehaviorPreset.COMPLIANCE_STRICT: LeadDetectionSensitivity.LOW,
    BehaviorPreset.SALES_HEAVY: LeadDetectionSensitivity.HIGH,
}


def _as_template(template_record: Union[BotTemplate, dict, None]) -> Optional[BotTemplate]:
    if template_record is None or isinstance(template_record, BotTemplate):
        return template_record
    return BotTemplate.model_validate(template_record)


def _as_overrides(overrides: Union[TemplateOverrides, dict, None]) -> TemplateOverrides:
    if isinstance(overrides, TemplateOverrides):
        return overrides
    return TemplateOverrides.model_validate(overrides or {})


def _build_error(error: str, code: BuildErrorCode) -> BuildError:
    logger.warning(f"Template build rejected ({code.value}): {error}")
    return BuildError(error=error, code=code)


def merge_faqs(template_faqs: list, custom_faqs: list) -> list[Faq]:
    """Template FAQs first, then custom FAQs replacing any with the same normalized question"""
    merged: dict[str, Faq] = {}
    for faq in list(template_faqs) + list(custom_faqs):
        faq = faq if isinstance(faq, Faq) else Faq.model_validate(faq)
        merged[normalize_faq_question(faq.question)] = faq
    return list(merged.values())


def lead_sensitivity_for(preset: BehaviorPreset) -> LeadDetectionSensitivity:
    return LEAD_SENSITIVITY_BY_PRESET.get(preset, LeadDetectionSensitivity.MEDIUM)


def _template_booking_mode(booking_profile: Optional[dict]) -> BookingMode:
    profile = booking_profile or {}
    return BookingMode(profile.get("mode") or profile.get("default_mode") or BookingMode.INTERNAL.value)


def _failsafe_enabled(booking_profile: Optional[dict]) -> bool:
    """
    Explicit failsafe_enabled wins. Legacy rows carry a failsafe policy object
    instead; anything that doesn't state a policy is treated as failsafe-on.
    """
    if not booking_profile:
        return True
    if "failsafe_enabled" in booking_profile and booking_profile["failsafe_enabled"] is not None:
        return bool(booking_profile["failsafe_enabled"])
    failsafe = booking_profile.get("failsafe")
    if isinstance(failsafe, dict) and "external_missing_url_behavior" in failsafe:
        return failsafe["external_missing_url_behavior"] == "pivot_to_internal"
    return True


def _merge_business_profile(config: dict, overrides: TemplateOverrides) -> BusinessProfile:
    template_profile = config.get("business_profile") or {}
    merged: dict[str, Any] = {
        "type": template_profile.get("type") or "general",
        "services": list(template_profile.get("services") or []),
    }
    if overrides.business_profile is not None:
        merged.update(overrides.business_profile.model_dump(exclude_none=True))
    if overrides.contact is not None:
        if overrides.contact.phone:
            merged["phone"] = overrides.contact.phone
        if overrides.contact.email:
            merged["email"] = overrides.contact.email

    # Always last: the client name is authoritative over any supplied profile
    merged["business_name"] = overrides.client_name
    return BusinessProfile.model_validate(merged)


def _build_rules(config: dict) -> BotRules:
    rules = copy.deepcopy(config.get("rules") or {})
    crisis = rules.get("crisis_handling") or {}
    if not crisis.get("keywords"):
        rules["crisis_handling"] = CrisisHandling(
            keywords=list(DEFAULT_CRISIS_KEYWORDS),
            response_template=crisis.get("response_template"),
        )
    return BotRules.model_validate(rules)


def _build_automations(config: dict, booking_mode: BookingMode, external_url: Optional[str]) -> AutomationConfig:
    automations = copy.deepcopy(config.get("automations") or {})
    automations["booking_capture"] = BookingCapture(
        enabled=True,
        mode=booking_mode,
        external_url=external_url,
        failsafe_enabled=True,
    )
    return AutomationConfig.model_validate(automations)


def _build_widget_seed(config: dict) -> WidgetSettingsSeed:
    theme = config.get("theme") or {}
    booking_profile = config.get("booking_profile") or {}

    if config.get("cta_buttons"):
        cta_buttons = [CtaButton.model_validate(cta) for cta in config["cta_buttons"]]
    else:
        # Legacy rows keep CTAs on the booking profile
        cta_buttons = [
            CtaButton(
                id=cta["id"],
                label=cta["label"],
                prompt=f"I'd like to {cta['label'].lower()}" if cta.get("appointment_type_id") else "",
                is_primary=cta.get("kind") == "primary",
            )
            for cta in booking_profile.get("ctas") or []
        ]

    disclaimer = config.get("disclaimer") or (booking_profile.get("disclaimers") or {}).get("text")

    return WidgetSettingsSeed(
        primary_color=theme.get("primary_color") or DEFAULT_PRIMARY_COLOR,
        welcome_message=theme.get("welcome_message") or DEFAULT_WELCOME_MESSAGE,
        cta_buttons=cta_buttons,
        disclaimer=disclaimer,
    )


def _build_booking_seed(config: dict, external_url: Optional[str]) -> BookingProfileSeed:
    booking_profile = config.get("booking_profile")
    if not booking_profile:
        return BookingProfileSeed(mode=BookingMode.INTERNAL, failsafe_enabled=True)

    appointment_types = None
    if booking_profile.get("appointment_types"):
        appointment_types = [
            AppointmentTypeSeed(id=apt["id"], label=apt["label"], mode=apt["mode"])
            for apt in booking_profile["appointment_types"]
        ]

    return BookingProfileSeed(
        mode=_template_booking_mode(booking_profile),
        external_url=external_url,
        failsafe_enabled=_failsafe_enabled(booking_profile),
        appointment_types=appointment_types,
    )


def build_client_from_template(
    template_record: Union[BotTemplate, dict, None],
    overrides: Union[TemplateOverrides, dict, None],
) -> BuildClientResult:
    """
    Build a complete client bundle from a persisted template row.

    Validation order: template exists, client_id, client_name, default_config.
    The first failure is returned as a BuildError.
    """
    if template_record is None:
        return _build_error("Template not found in database", BuildErrorCode.MISSING_TEMPLATE)

    try:
        overrides = _as_overrides(overrides)
    except ValidationError as e:
        return _build_error(f"Invalid overrides: {e}", BuildErrorCode.MISSING_REQUIRED_FIELD)
    if not overrides.client_id:
        return _build_error("client_id is required", BuildErrorCode.MISSING_REQUIRED_FIELD)
    if not overrides.client_name:
        return _build_error("client_name is required", BuildErrorCode.MISSING_REQUIRED_FIELD)

    try:
        template = _as_template(template_record)
    except ValidationError as e:
        return _build_error(f"Invalid template record: {e}", BuildErrorCode.INVALID_TEMPLATE_CONFIG)
    if not template.default_config:
        return _build_error("Template has no default configuration", BuildErrorCode.INVALID_TEMPLATE_CONFIG)

    try:
        return BuildSuccess(data=_assemble_bundle(template, overrides))
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        return _build_error(f"Invalid template configuration: {e}", BuildErrorCode.INVALID_TEMPLATE_CONFIG)


def _assemble_bundle(template: BotTemplate, overrides: TemplateOverrides) -> BuildResult:
    config = template.default_config
    client_id = overrides.client_id
    client_name = overrides.client_name
    bot_id = overrides.bot_id or f"{client_id}_main"

    business_profile = _merge_business_profile(config, overrides)
    faqs = merge_faqs(config.get("faqs") or [], overrides.custom_faqs)

    behavior_preset = overrides.behavior_preset or DEFAULT_BEHAVIOR_PRESET

    template_personality = config.get("personality") or {}
    formality = template_personality.get("formality")
    personality = Personality(
        tone=template_personality.get("tone") or DEFAULT_TONE,
        formality=DEFAULT_FORMALITY if formality is None else formality,
    )

    booking_mode = _template_booking_mode(config.get("booking_profile"))

    bot_config = BotConfig(
        client_id=client_id,
        bot_id=bot_id,
        name=client_name,
        description=f"AI assistant for {client_name}",
        business_profile=business_profile,
        rules=_build_rules(config),
        system_prompt=config.get("system_prompt") or "",
        faqs=faqs,
        automations=_build_automations(config, booking_mode, overrides.external_booking_url),
        personality=personality,
        quick_actions=[],
        external_booking_url=overrides.external_booking_url,
        bot_type=template.bot_type,
        metadata=BotMetadata(
            is_demo=False,
            is_template=False,
            cloned_from=template.template_id,
            created_at=utc_now().date().isoformat(),
            version="2.0",
            industry_template=template.template_id,
            onboarding_status=OnboardingStatus.DRAFT,
            disclaimer=config.get("disclaimer"),
        ),
    )

    contact = overrides.contact
    website = overrides.business_profile.website if overrides.business_profile else None
    client_settings_seed = ClientSettingsSeed(
        client_id=client_id,
        business_name=client_name,
        business_type=business_profile.type,
        primary_phone=(contact.phone if contact else None) or business_profile.phone or "",
        primary_email=(contact.email if contact else None) or business_profile.email or "",
        website_url=website or "",
        timezone=overrides.timezone or DEFAULT_TIMEZONE,
        external_booking_url=overrides.external_booking_url,
        behavior_preset=behavior_preset,
        lead_detection_sensitivity=lead_sensitivity_for(behavior_preset),
        plan=overrides.plan or Plan.FREE,
        status="active",
    )

    return BuildResult(
        bot_config=bot_config,
        client_settings_seed=client_settings_seed,
        widget_settings_seed=_build_widget_seed(config),
        booking_profile_seed=_build_booking_seed(config, overrides.external_booking_url),
        faq_seed=list(faqs),
    )


def validate_template_for_provisioning(template_record: Union[BotTemplate, dict, None]) -> TemplateValidation:
    """Pre-flight check that a template row has everything provisioning reads"""
    try:
        template = _as_template(template_record)
    except ValidationError as e:
        return TemplateValidation(valid=False, errors=[f"Template record is malformed: {e}"])
    if template is None:
        return TemplateValidation(valid=False, errors=["Template not found"])

    errors = []
    if not template.template_id:
        errors.append("Template missing template_id")

    if not template.default_config:
        errors.append("Template missing default_config")
    else:
        if not template.default_config.get("business_profile"):
            errors.append("Template missing business_profile in default_config")
        if not template.default_config.get("system_prompt"):
            errors.append("Template missing system_prompt in default_config")

    if not template.bot_type:
        errors.append("Template missing bot_type")

    return TemplateValidation(valid=not errors, errors=errors)
