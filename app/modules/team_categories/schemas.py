from pydantic import BaseModel
from typing import Optional
from app.core.schemas import OrderedRecord, RequiredText


class TeamCategoryCreate(BaseModel):
    name: RequiredText


class TeamCategoryUpdate(TeamCategoryCreate):
    order_index: Optional[int] = None


class TeamCategoryResponse(OrderedRecord):
    name: str
