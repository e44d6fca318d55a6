"""
Pydantic models for user health records.

These schemas describe the payloads in the generated API
documentation.  Request bodies are not validated against them: the
directory stores whatever JSON object the client sends, so routes
accept plain dictionaries and reference these models only in their
documented responses.
"""

from pydantic import BaseModel, Field

USER_EXAMPLE = {
    "id": 1,
    "name": "John Doe",
    "age": 30,
    "weight": 75,
    "height": 180,
}


class User(BaseModel):
    """A single user health record."""

    id: int
    name: str
    age: int
    weight: int
    height: int

    model_config = {
        "json_schema_extra": {"example": USER_EXAMPLE},
    }


class ErrorResponse(BaseModel):
    """Body returned for not‑found and immutable‑name errors."""

    error: str = Field(..., description="Human readable error message")

    model_config = {
        "json_schema_extra": {"example": {"error": "User not found"}},
    }
