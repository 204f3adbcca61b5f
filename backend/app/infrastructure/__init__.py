"""Infrastructure — database pool, logging setup, credential hashing.
"""
