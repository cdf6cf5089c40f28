"""
Pydantic schema definitions for API payloads.

Each domain (users, tasks) defines its own Pydantic models for request
and response bodies.  Schemas are separated from the persisted entities
in ``models`` to decouple API representation from storage.
"""
