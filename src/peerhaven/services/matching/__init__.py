"""
Matching core: intent classification, response composition,
helper ranking and emergency contact triage.
"""

from peerhaven.services.matching.contact_triage import ContactTriage
from peerhaven.services.matching.helper_ranking import HelperRankingEngine
from peerhaven.services.matching.intent_classifier import IntentClassifier
from peerhaven.services.matching.response_composer import (
    ResponseComposer,
    select_top_contacts,
    select_topic_entries,
)

__all__ = [
    "ContactTriage",
    "HelperRankingEngine",
    "IntentClassifier",
    "ResponseComposer",
    "select_top_contacts",
    "select_topic_entries",
]
