"""Pydantic schemas for domain entities and API contracts."""
