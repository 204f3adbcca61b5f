"""Database Infrastructure — declarative Base and the column types every model shares.

Invariants:
    - Identifiers are 16-byte blobs, timestamps are UTC (db/types.py)
"""
