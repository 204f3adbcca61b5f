"""Repositories — all store access for one entity type per module.

Invariants:
    - Each public method checks out exactly one session from DatabaseSessionManager
    - Point lookups raise ResourceNotFoundError; list queries return [] when empty
"""
