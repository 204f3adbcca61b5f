"""Core — pure domain code: identity, errors, outcomes, boundary protocols.

Invariants:
    - No IO here; repositories and the graph layer depend on these modules, not the reverse
"""
