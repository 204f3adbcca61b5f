"""Graph Resolution Layer — strawberry GraphQL schema over the repositories.

Invariants:
    - Each root field and each relationship field performs exactly one repository call
    - Repository failures are settled into Outcomes; clients see null unless fault
      surfacing is enabled
"""
