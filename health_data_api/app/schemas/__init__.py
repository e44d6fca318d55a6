"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in‑memory directory so that the
documented representation can evolve independently of storage.
"""
