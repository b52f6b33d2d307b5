"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored record so that the API
representation stays decoupled from persistence.
"""
