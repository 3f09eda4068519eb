"""
Feature modules for Cubify.

Each feature is a self-contained module with:
- models.py - Domain dataclasses
- schemas.py - Pydantic schemas
- service.py - Orchestration
- client.py - External API access (optional)
"""
