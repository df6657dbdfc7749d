from pydantic import BaseModel
from typing import Optional, List
from app.core.schemas import OrderedRecord, RequiredText


class TeamMemberBase(BaseModel):
    name: RequiredText
    role: RequiredText
    bio: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None


class TeamMemberCreate(TeamMemberBase):
    pass


class TeamMemberUpdate(TeamMemberBase):
    order_index: Optional[int] = None


class TeamMemberResponse(OrderedRecord):
    name: str
    role: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None


class TeamGroupResponse(BaseModel):
    name: str
    category_id: Optional[str] = None
    members: List[TeamMemberResponse] = []
