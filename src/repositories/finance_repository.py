from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from src.core.supabase import SupabaseClient
from src.models.hotel_operations import ENTRY_TYPE_REVENUE, FinancialEntryRecord
from src.repositories.base import parse_rows


ENTRY_COLUMNS = (
    "id,hotel_id,type,profit_center,room_category,package_type,season_type,net_amount,occurred_at"
)


class FinanceRepository:
    def __init__(self) -> None:
        self.client = SupabaseClient()

    def list_revenue_entries(
        self,
        hotel_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[FinancialEntryRecord]:
        filters: List[Tuple[str, str]] = [
            ("hotel_id", f"eq.{hotel_id}"),
            ("type", f"eq.{ENTRY_TYPE_REVENUE}"),
        ]
        if start:
            filters.append(("occurred_at", f"gte.{start.isoformat()}"))
        if end:
            filters.append(("occurred_at", f"lte.{end.isoformat()}"))
        rows = self.client.select_all(
            table="financial_entries",
            select=ENTRY_COLUMNS,
            filters=filters,
            order="occurred_at.asc,id.asc",
        )
        return parse_rows(FinancialEntryRecord, rows, "financial_entries")
