"""Domain layer — graph node types and traversal enums.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
