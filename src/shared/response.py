from __future__ import annotations

from datetime import datetime
from typing import Generic, Optional, TypeVar

from src.shared.base import BaseSchema


T = TypeVar("T")


class Meta(BaseSchema):
    as_of_date: str
    source: str
    time_window: str
    calculation_version: str
    hotel_id: Optional[str] = None
    currency: Optional[str] = None
    generated_at: Optional[str] = None


class ResponseEnvelope(BaseSchema, Generic[T]):
    data: T
    meta: Optional[Meta] = None


def build_meta(
    *,
    source: str,
    time_window: str,
    as_of: Optional[datetime] = None,
    hotel_id: Optional[str] = None,
    calculation_version: str = "v1",
) -> Meta:
    now = datetime.now()
    return Meta(
        as_of_date=(as_of or now).date().isoformat(),
        source=source,
        time_window=time_window,
        calculation_version=calculation_version,
        hotel_id=hotel_id,
        generated_at=now.isoformat(timespec="seconds"),
    )
