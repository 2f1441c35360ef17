"""
PeerHaven Infrastructure Layer

Stores, database access, speech synthesis and metrics.
"""
