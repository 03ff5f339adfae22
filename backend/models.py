"""
Assistant Provisioning Data Models - Pydantic models for templates, bot configs and seeds
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Dict, Any, Literal, Union
from datetime import datetime, timezone
from enum import Enum
import uuid


def generate_id():
    return str(uuid.uuid4())


def utc_now():
    return datetime.now(timezone.utc)


# ============= ENUMS =============

class BehaviorPreset(str, Enum):
    SUPPORT_LEAD_FOCUSED = "support_lead_focused"
    SALES_FOCUSED_SOFT = "sales_focused_soft"
    SUPPORT_ONLY = "support_only"
    COMPLIANCE_STRICT = "compliance_strict"
    SALES_HEAVY = "sales_heavy"


class BookingMode(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class LeadDetectionSensitivity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class OnboardingStatus(str, Enum):
    DRAFT = "draft"
    QA_PENDING = "qa_pending"
    QA_PASSED = "qa_passed"
    LIVE = "live"


class Plan(str, Enum):
    FREE = "free"
    STARTER = "starter"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class BuildErrorCode(str, Enum):
    MISSING_TEMPLATE = "MISSING_TEMPLATE"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_TEMPLATE_CONFIG = "INVALID_TEMPLATE_CONFIG"


class SeedAction(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    ERROR = "error"


DEFAULT_BEHAVIOR_PRESET = BehaviorPreset.SUPPORT_LEAD_FOCUSED
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_CRISIS_RESPONSE = "If you are in crisis, please call 911 or your local emergency number."

# Used when a template ships no crisis handling of its own
DEFAULT_CRISIS_KEYWORDS: List[str] = [
    "suicide",
    "suicidal",
    "kill myself",
    "end my life",
    "ending it",
    "hurt myself",
    "self harm",
    "overdose",
    "want to die",
]


# ============= BOT CONFIG MODELS =============

class BusinessProfile(BaseModel):
    model_config = ConfigDict(extra="allow")
    business_name: str = ""
    type: str = "general"
    location: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    hours: Dict[str, str] = Field(default_factory=dict)
    services: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    service_area: Optional[str] = None
    tagline: Optional[str] = None


class BusinessProfileUpdate(BaseModel):
    """Partial business profile supplied at onboarding; unset fields keep template defaults"""
    model_config = ConfigDict(extra="allow")
    business_name: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    hours: Optional[Dict[str, str]] = None
    services: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    service_area: Optional[str] = None
    tagline: Optional[str] = None


class Faq(BaseModel):
    question: str
    answer: str


class CrisisHandling(BaseModel):
    keywords: List[str] = Field(default_factory=list)
    response_template: Optional[str] = None


class BotRules(BaseModel):
    allowed_topics: List[str] = Field(default_factory=list)
    forbidden_topics: List[str] = Field(default_factory=list)
    special_instructions: List[str] = Field(default_factory=list)
    crisis_handling: CrisisHandling = Field(default_factory=CrisisHandling)


class Personality(BaseModel):
    tone: Optional[str] = None  # professional, friendly, casual, compassionate, informative
    response_length: Optional[str] = None  # brief, short, medium, detailed, long
    formality: Optional[int] = None  # 0-100
    enthusiasm: Optional[int] = None
    warmth: Optional[int] = None
    humor: Optional[int] = None


class BookingCapture(BaseModel):
    enabled: bool = True
    mode: BookingMode = BookingMode.INTERNAL
    external_url: Optional[str] = None
    failsafe_enabled: bool = True
    failsafe_active: Optional[bool] = None


class AutomationConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    automations: List[Dict[str, Any]] = Field(default_factory=list)
    office_hours: Optional[Dict[str, Any]] = None
    lead_capture: Optional[Dict[str, Any]] = None
    booking_capture: Optional[BookingCapture] = None
    fallback: Optional[Dict[str, Any]] = None


class QuickAction(BaseModel):
    id: str
    label: str
    prompt: Optional[str] = None


class BotMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")
    is_demo: bool = False
    is_template: bool = False
    cloned_from: Optional[str] = None
    created_at: Optional[str] = None
    version: str = "2.0"
    industry_template: Optional[str] = None
    onboarding_status: OnboardingStatus = OnboardingStatus.DRAFT
    disclaimer: Optional[str] = None


class BotConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")
    client_id: str
    bot_id: str
    name: str
    description: str = ""
    business_profile: BusinessProfile = Field(default_factory=BusinessProfile)
    rules: BotRules = Field(default_factory=BotRules)
    system_prompt: str = ""
    faqs: List[Faq] = Field(default_factory=list)
    automations: AutomationConfig = Field(default_factory=AutomationConfig)
    personality: Personality = Field(default_factory=Personality)
    quick_actions: List[QuickAction] = Field(default_factory=list)
    external_booking_url: Optional[str] = None
    external_payment_url: Optional[str] = None
    bot_type: Optional[str] = None
    metadata: BotMetadata = Field(default_factory=BotMetadata)
    status: str = "active"


# ============= TEMPLATE MODELS =============

class BotTemplate(BaseModel):
    """Persisted industry template row (bot_templates collection)"""
    model_config = ConfigDict(extra="ignore")
    id: str = Field(default_factory=generate_id)
    template_id: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    bot_type: Optional[str] = None
    icon: Optional[str] = None
    default_config: Optional[Dict[str, Any]] = None
    is_active: bool = True
    display_order: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ContactOverrides(BaseModel):
    phone: Optional[str] = None
    email: Optional[str] = None


class TemplateOverrides(BaseModel):
    """Client-specific values supplied once at onboarding"""
    client_id: Optional[str] = None
    client_name: Optional[str] = None
    bot_id: Optional[str] = None
    business_profile: Optional[BusinessProfileUpdate] = None
    custom_faqs: List[Faq] = Field(default_factory=list)
    contact: Optional[ContactOverrides] = None
    plan: Optional[Plan] = None
    external_booking_url: Optional[str] = None
    behavior_preset: Optional[BehaviorPreset] = None
    timezone: Optional[str] = None


# ============= PROVISIONING SEEDS =============

class ClientSettingsSeed(BaseModel):
    client_id: str
    business_name: str
    business_type: str
    primary_phone: str = ""
    primary_email: str = ""
    website_url: str = ""
    timezone: str = DEFAULT_TIMEZONE
    external_booking_url: Optional[str] = None
    behavior_preset: BehaviorPreset
    lead_detection_sensitivity: LeadDetectionSensitivity
    plan: Plan = Plan.FREE
    status: Literal["active", "pending", "suspended"] = "active"


class CtaButton(BaseModel):
    id: str
    label: str
    prompt: str = ""
    is_primary: bool = False


class WidgetSettingsSeed(BaseModel):
    primary_color: str
    position: Literal["bottom-right", "bottom-left"] = "bottom-right"
    theme: Literal["light", "dark", "auto"] = "auto"
    welcome_message: str
    cta_buttons: List[CtaButton] = Field(default_factory=list)
    disclaimer: Optional[str] = None


class AppointmentTypeSeed(BaseModel):
    id: str
    label: str
    mode: BookingMode


class BookingProfileSeed(BaseModel):
    mode: BookingMode
    external_url: Optional[str] = None
    failsafe_enabled: bool
    appointment_types: Optional[List[AppointmentTypeSeed]] = None


class BuildResult(BaseModel):
    bot_config: BotConfig
    client_settings_seed: ClientSettingsSeed
    widget_settings_seed: WidgetSettingsSeed
    booking_profile_seed: BookingProfileSeed
    faq_seed: List[Faq]


class BuildSuccess(BaseModel):
    success: Literal[True] = True
    data: BuildResult


class BuildError(BaseModel):
    success: Literal[False] = False
    error: str
    code: BuildErrorCode


BuildClientResult = Union[BuildSuccess, BuildError]


class TemplateValidation(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)


# ============= SEEDING RESULTS =============

class SeedResult(BaseModel):
    industry_key: str
    template_id: str
    action: SeedAction
    error: Optional[str] = None


class EnsureTemplatesResult(BaseModel):
    seeded: int = 0
    updated: int = 0
    skipped: bool = False
    error: Optional[str] = None
    results: List[SeedResult] = Field(default_factory=list)


# ============= CONVERSATION TURN =============

class TurnPlan(BaseModel):
    """Instructions for one inbound user turn, produced before the model call"""
    crisis_detected: bool = False
    crisis_response: Optional[str] = None
    system_prompt: Optional[str] = None
