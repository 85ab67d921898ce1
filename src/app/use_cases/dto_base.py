"""Shared base for use case DTOs

Fields are declared in snake_case and exposed as camelCase on the wire.
Either spelling is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponseDTO(CamelModel):
    """Plain acknowledgement body"""
    message: str
