"""Shared Pydantic base with camelCase wire-format serialization."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys in tool results.

    ``model_dump(by_alias=True)`` produces the wire form; either spelling
    is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
