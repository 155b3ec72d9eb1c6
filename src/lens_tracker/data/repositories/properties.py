from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..supabase import SupabaseGateway


@dataclass(slots=True)
class SupabasePropertyStore:
    """Key/value rows (``user_id``, ``key``, ``value``) scoped to the signed-in user."""

    gateway: SupabaseGateway
    table_name: str

    def get_properties(self) -> dict[str, str]:
        user_id = self.gateway.current_user_id()
        response = (
            self.gateway
            .table(self.table_name)
            .select("key, value")
            .eq("user_id", user_id)
            .execute()
        )
        records = response.data or []
        return {str(record["key"]): str(record.get("value") or "") for record in records}

    def set_properties(self, values: Mapping[str, str]) -> None:
        user_id = self.gateway.current_user_id()
        rows = [{"user_id": user_id, "key": key, "value": value} for key, value in values.items()]
        if not rows:
            return
        # A single upsert request, so the rows land together.
        (
            self.gateway
            .table(self.table_name)
            .upsert(rows, on_conflict="user_id,key")
            .execute()
        )
