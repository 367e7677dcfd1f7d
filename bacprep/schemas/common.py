"""
Common schemas for API requests and responses.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest id the database can store (signed 64-bit INTEGER)
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class Message(BaseModel):
    """Generic message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    message: str
