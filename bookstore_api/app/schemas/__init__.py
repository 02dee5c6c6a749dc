"""
Pydantic schema definitions for API payloads.

Schemas are separated from the ``Book`` record used by the repository
layer to decouple the API representation from persistence.
"""
