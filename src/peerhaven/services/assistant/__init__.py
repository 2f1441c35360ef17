"""Conversational support assistant."""

from peerhaven.services.assistant.support_assistant import (
    QUICK_PROMPTS,
    AssistantReply,
    SupportAssistant,
)

__all__ = ["QUICK_PROMPTS", "AssistantReply", "SupportAssistant"]
