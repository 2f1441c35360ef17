"""Metrics infrastructure package."""

from peerhaven.infrastructure.metrics.prometheus_metrics import (
    CRISIS_RESPONSES_TOTAL,
    HELPER_SEARCHES_TOTAL,
    INTENTS_CLASSIFIED_TOTAL,
    SPEECH_REQUESTS_TOTAL,
    STORE_FAILURES_TOTAL,
    metrics_router,
    track_crisis_response,
    track_helper_search,
    track_intent,
    track_speech_request,
    track_store_failure,
    update_system_info,
)

__all__ = [
    "CRISIS_RESPONSES_TOTAL",
    "HELPER_SEARCHES_TOTAL",
    "INTENTS_CLASSIFIED_TOTAL",
    "SPEECH_REQUESTS_TOTAL",
    "STORE_FAILURES_TOTAL",
    "metrics_router",
    "track_crisis_response",
    "track_helper_search",
    "track_intent",
    "track_speech_request",
    "track_store_failure",
    "update_system_info",
]
