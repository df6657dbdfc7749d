from pydantic import BaseModel
from typing import Optional
from app.core.schemas import OrderedRecord, RequiredText


class ClientBase(BaseModel):
    name: RequiredText
    logo_url: Optional[str] = None
    website_url: Optional[str] = None


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    order_index: Optional[int] = None


class ClientResponse(OrderedRecord):
    name: str
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
