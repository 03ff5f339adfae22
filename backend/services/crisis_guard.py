"""
Crisis Guard

Classifies an inbound message against the bot's configured crisis keywords and
selects the escalation text the conversation layer sends instead of a model reply.

Matching is plain substring matching on a normalized message: a keyword of
"die" also matches "diet". False positives are accepted; a missed crisis is not.
"""
import re
from typing import Optional

from models import BotConfig, DEFAULT_CRISIS_RESPONSE

_PUNCTUATION_RE = re.compile(r"[^\w\s]")

RECOVERY_BUSINESS_KEYWORDS = ("sober", "recovery", "halfway", "transitional")

RECOVERY_CRISIS_RESPONSE = """I hear you, and I want you to know that help is available right now.

**If you're in immediate danger:**
Call 911 (Emergency Services)

**For crisis support:**
Call or text 988 (Suicide & Crisis Lifeline)
Call 1-800-662-4357 (SAMHSA National Helpline - 24/7, free, confidential)

You're not alone in this. If you'd like, you can also share your name and phone number, and one of our team members can reach out to you when it's safe. There's no pressure - your well-being comes first."""


def is_recovery_business(business_type: Optional[str]) -> bool:
    """True for sober living / recovery / transitional housing business types"""
    text = (business_type or "").lower()
    return any(keyword in text for keyword in RECOVERY_BUSINESS_KEYWORDS)


def normalize_message(message: str) -> str:
    return _PUNCTUATION_RE.sub(" ", (message or "").lower())


def detect_crisis_in_message(message: str, bot_config: BotConfig) -> bool:
    normalized = normalize_message(message)
    keywords = bot_config.rules.crisis_handling.keywords
    return any(
        keyword.lower() in normalized
        for keyword in keywords
        if keyword
    )


def get_crisis_response(bot_config: BotConfig) -> str:
    """
    Pick the escalation message for a detected crisis.

    A configured response template always wins. Otherwise recovery businesses
    get the extended hotline script and everyone else gets the emergency line.
    """
    template = bot_config.rules.crisis_handling.response_template
    if template:
        return template
    if is_recovery_business(bot_config.business_profile.type):
        return RECOVERY_CRISIS_RESPONSE
    return DEFAULT_CRISIS_RESPONSE
