"""Per-turn preparation for the conversation loop: crisis gate first, then prompt compilation"""
import logging
from typing import Optional, Union

from models import BehaviorPreset, BotConfig, TurnPlan
from services.crisis_guard import detect_crisis_in_message, get_crisis_response
from services.prompt_compiler import build_system_prompt_from_config

logger = logging.getLogger(__name__)


def apply_client_settings(bot_config: BotConfig, client_settings: Optional[dict]) -> BotConfig:
    """Copy of the config with the tenant's current booking/payment URLs layered on"""
    if not client_settings:
        return bot_config
    updates = {
        field: client_settings[field]
        for field in ("external_booking_url", "external_payment_url")
        if client_settings.get(field)
    }
    return bot_config.model_copy(update=updates) if updates else bot_config


def prepare_turn(
    bot_config: BotConfig,
    user_message: str,
    behavior_preset: Optional[Union[BehaviorPreset, str]] = None,
    client_settings: Optional[dict] = None,
) -> TurnPlan:
    """
    Decide how one inbound message is handled.

    A crisis short-circuits the turn: the escalation text is returned and no
    prompt is compiled. Otherwise the returned prompt is what the model sees.
    """
    if detect_crisis_in_message(user_message, bot_config):
        logger.warning(f"Crisis keywords detected for bot {bot_config.bot_id}")
        return TurnPlan(crisis_detected=True, crisis_response=get_crisis_response(bot_config))

    if behavior_preset is None and client_settings:
        behavior_preset = client_settings.get("behavior_preset")

    config = apply_client_settings(bot_config, client_settings)
    return TurnPlan(system_prompt=build_system_prompt_from_config(config, behavior_preset))
