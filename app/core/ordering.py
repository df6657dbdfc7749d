"""
Ordered collections backed by a Supabase table.

Every managed table carries an integer ``order_index`` column. Rows are
displayed by ``(order_index, id)``; values need not be unique and gaps left
by deletes are never compacted.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from app.config import settings
from app.core.errors import StoreError, RecordNotFound, ReorderConflict

logger = logging.getLogger(__name__)

UP = "up"
DOWN = "down"


def sort_key(row: Dict[str, Any]):
    # ties fall back to insertion order, then id
    return (row.get("order_index") or 0, str(row.get("created_at") or ""), str(row.get("id", "")))


class OrderedCollection:
    def __init__(self, supabase: Client, table: str, max_attempts: Optional[int] = None):
        self.supabase = supabase
        self.table = table
        self.max_attempts = max_attempts or settings.reorder_max_attempts

    def _fail(self, action: str, exc: Exception) -> StoreError:
        logger.error(f"Failed to {action} {self.table}: {exc}")
        return StoreError(f"Failed to {action} {self.table}", table=self.table)

    def list(self) -> List[Dict[str, Any]]:
        try:
            result = self.supabase.table(self.table)\
                .select("*")\
                .order("order_index")\
                .execute()
        except Exception as e:
            raise self._fail("list", e)
        return sorted(result.data or [], key=sort_key)

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        try:
            result = self.supabase.table(self.table)\
                .select("*")\
                .eq("id", record_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            raise self._fail("read", e)
        if not result or not result.data:
            return None
        return result.data

    def append(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert at the tail. Not isolated: concurrent appends may share an order_index."""
        row = {k: v for k, v in record.items() if k not in ("id", "order_index")}
        row["order_index"] = len(self.list())
        try:
            result = self.supabase.table(self.table).insert(row).execute()
        except Exception as e:
            raise self._fail("insert into", e)
        if not result.data:
            raise StoreError(f"Insert into {self.table} returned no row", table=self.table)
        logger.info(f"Appended to {self.table} at order_index={row['order_index']}")
        return result.data[0]

    def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        row = {k: v for k, v in fields.items() if k != "id"}
        if row.get("order_index") is None:
            row.pop("order_index", None)
        try:
            result = self.supabase.table(self.table)\
                .update(row)\
                .eq("id", record_id)\
                .execute()
        except Exception as e:
            raise self._fail("update", e)
        if not result.data:
            return None
        return result.data[0]

    def remove(self, record_id: str) -> bool:
        try:
            result = self.supabase.table(self.table).delete().eq("id", record_id).execute()
        except Exception as e:
            raise self._fail("delete from", e)
        deleted = bool(result.data)
        if deleted:
            logger.info(f"Deleted {record_id} from {self.table}")
        return deleted

    def _set_index_if(self, record_id: str, expected: int, value: int) -> bool:
        """Conditional write: only applies while the row still holds ``expected``."""
        try:
            result = self.supabase.table(self.table)\
                .update({"order_index": value})\
                .eq("id", record_id)\
                .eq("order_index", expected)\
                .execute()
        except Exception as e:
            raise self._fail("reorder", e)
        return bool(result.data)

    def _renumber(self, rows: List[Dict[str, Any]]) -> bool:
        """Rewrite order_index to 0..n-1 in the current order. False on a concurrent change."""
        for position, row in enumerate(rows):
            current = row.get("order_index") or 0
            if current != position and not self._set_index_if(row["id"], current, position):
                return False
        return True

    def reorder(self, record_id: str, direction: str) -> List[Dict[str, Any]]:
        if direction not in (UP, DOWN):
            raise ValueError(f"direction must be '{UP}' or '{DOWN}'")

        for attempt in range(1, self.max_attempts + 1):
            rows = self.list()
            position = next((i for i, r in enumerate(rows) if r["id"] == record_id), None)
            if position is None:
                raise RecordNotFound(f"{record_id} not found in {self.table}", table=self.table)

            neighbour_position = position - 1 if direction == UP else position + 1
            if neighbour_position < 0 or neighbour_position >= len(rows):
                return rows

            current, neighbour = rows[position], rows[neighbour_position]
            current_index = current.get("order_index") or 0
            neighbour_index = neighbour.get("order_index") or 0

            if current_index == neighbour_index:
                # a swap of equal values moves nothing; renumber to positions first
                if not self._renumber(rows):
                    logger.warning(f"Reorder conflict renumbering {self.table} (attempt {attempt})")
                    continue
                current_index, neighbour_index = position, neighbour_position
            new_current, new_neighbour = neighbour_index, current_index

            if new_current != current_index and not self._set_index_if(current["id"], current_index, new_current):
                logger.warning(f"Reorder conflict on {self.table}/{current['id']} (attempt {attempt})")
                continue
            if new_neighbour != neighbour_index and not self._set_index_if(neighbour["id"], neighbour_index, new_neighbour):
                logger.warning(f"Reorder conflict on {self.table}/{neighbour['id']} (attempt {attempt})")
                if new_current != current_index:
                    self._set_index_if(current["id"], new_current, current_index)
                continue
            return self.list()

        raise ReorderConflict(
            f"Could not move {record_id} in {self.table} after {self.max_attempts} attempts",
            table=self.table,
        )
