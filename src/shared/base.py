from __future__ import annotations

from pydantic import BaseModel
from pydantic.config import ConfigDict


def to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class BaseSchema(BaseModel):
    # Report values are produced once per request and never edited afterwards.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
