"""Threadboard Application Package — threaded messaging-board GraphQL API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
