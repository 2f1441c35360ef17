"""
Prometheus Metrics

Counters for the matching core, exposed at /metrics for
Prometheus scraping.

ARCHITECTURE: Metrics are decoupled from business logic.
Only increment; never block on metrics operations.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Info,
    generate_latest,
)
from fastapi import APIRouter, Response

# =============================================================================
# MATCHING METRICS
# =============================================================================

INTENTS_CLASSIFIED_TOTAL = Counter(
    "peerhaven_intents_classified_total",
    "User messages classified, by intent kind",
    ["kind"],
)

CRISIS_RESPONSES_TOTAL = Counter(
    "peerhaven_crisis_responses_total",
    "Replies composed for crisis intents",
)

HELPER_SEARCHES_TOTAL = Counter(
    "peerhaven_helper_searches_total",
    "Helper searches ranked, by sort key",
    ["sort_key"],
)

# =============================================================================
# DEPENDENCY METRICS
# =============================================================================

STORE_FAILURES_TOTAL = Counter(
    "peerhaven_store_failures_total",
    "Store fetches that failed or timed out",
    ["store"],
)

SPEECH_REQUESTS_TOTAL = Counter(
    "peerhaven_speech_requests_total",
    "Speech synthesis requests",
    ["provider", "outcome"],  # outcome: spoken, degraded
)

SYSTEM_INFO = Info(
    "peerhaven_system",
    "PeerHaven build information",
)


def track_intent(kind: str) -> None:
    INTENTS_CLASSIFIED_TOTAL.labels(kind=kind).inc()


def track_crisis_response() -> None:
    CRISIS_RESPONSES_TOTAL.inc()


def track_helper_search(sort_key: str) -> None:
    HELPER_SEARCHES_TOTAL.labels(sort_key=sort_key).inc()


def track_store_failure(store: str) -> None:
    STORE_FAILURES_TOTAL.labels(store=store).inc()


def track_speech_request(provider: str, outcome: str) -> None:
    SPEECH_REQUESTS_TOTAL.labels(provider=provider, outcome=outcome).inc()


def update_system_info(version: str, environment: str, store_backend: str) -> None:
    SYSTEM_INFO.info({
        "version": version,
        "environment": environment,
        "store_backend": store_backend,
    })


# =============================================================================
# METRICS ENDPOINT
# =============================================================================

metrics_router = APIRouter()


@metrics_router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus exposition endpoint."""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST,
    )
