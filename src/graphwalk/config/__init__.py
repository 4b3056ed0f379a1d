"""Configuration — pydantic models, settings, discovery, and logging."""
