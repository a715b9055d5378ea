from __future__ import annotations

from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from src.core.errors import UpstreamError


RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_rows(model: Type[RecordT], rows: Iterable[Dict[str, Any]], table: str) -> List[RecordT]:
    try:
        return [model.model_validate(row) for row in rows]
    except ValidationError as exc:
        raise UpstreamError(f"Malformed {table} record returned by the store", table=table) from exc
