from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type

from fastapi import HTTPException
from pydantic import BaseModel
from supabase import Client

from app.core.ordering import OrderedCollection


class CollectionService:
    """CRUD + ordering for one ordered content table. Subclasses set the table and response model."""

    table: Optional[str] = None
    label: str = "Item"
    response_model: Optional[Type[BaseModel]] = None

    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.collection = OrderedCollection(supabase, self.table)

    def _to_response(self, row: Dict[str, Any]) -> BaseModel:
        return self.response_model(**row)

    def _prepare(self, data: BaseModel) -> Dict[str, Any]:
        return data.model_dump(mode="json")

    def list_items(self) -> List[BaseModel]:
        return [self._to_response(row) for row in self.collection.list()]

    def get_item(self, item_id: str) -> BaseModel:
        row = self.collection.get(item_id)
        if not row:
            raise HTTPException(status_code=404, detail=f"{self.label} not found")
        return self._to_response(row)

    def create_item(self, data: BaseModel) -> BaseModel:
        return self._to_response(self.collection.append(self._prepare(data)))

    def update_item(self, item_id: str, data: BaseModel) -> BaseModel:
        """Full-record update: omitted optional fields are cleared."""
        fields = self._prepare(data)
        fields["updated_at"] = datetime.now(timezone.utc).isoformat()
        row = self.collection.update(item_id, fields)
        if not row:
            raise HTTPException(status_code=404, detail=f"{self.label} not found")
        return self._to_response(row)

    def delete_item(self, item_id: str) -> None:
        self.collection.remove(item_id)

    def move_item(self, item_id: str, direction: str) -> List[BaseModel]:
        return [self._to_response(row) for row in self.collection.reorder(item_id, direction)]

    def set_field(self, item_id: str, field: str, value: Any) -> BaseModel:
        row = self.collection.update(item_id, {field: value})
        if not row:
            raise HTTPException(status_code=404, detail=f"{self.label} not found")
        return self._to_response(row)
