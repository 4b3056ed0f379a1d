"""Core layer — the depth-first walker and the queries built on it.

Depends only on the domain layer (and click for the default output sink).
"""
