"""Service layer — traversal queries returning ServiceResult.

Services may import from core, domain, and infrastructure layers.
They must never import from commands or output.
"""
