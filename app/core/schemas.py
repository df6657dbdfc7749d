from pydantic import BaseModel, StringConstraints
from typing import Annotated, Optional, Literal
from datetime import datetime

# Free text that must not be blank; no format validation beyond that
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class OrderedRecord(BaseModel):
    id: str
    order_index: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MoveRequest(BaseModel):
    direction: Literal["up", "down"]
