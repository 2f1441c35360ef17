"""
PeerHaven - Peer Support Marketplace Backend

This package provides the matching core behind the PeerHaven platform:
intent classification of free-text messages, crisis-aware response
composition, and filtering/ranking of peer helpers.

IMPORTANT: Crisis handling is safety-relevant. Crisis phrases always
take priority over every other intent.
"""

__version__ = "0.1.0"
__author__ = "PeerHaven Engineering Team"
