from pydantic import BaseModel
from typing import Optional
from app.core.schemas import OrderedRecord, RequiredText


class ServiceBase(BaseModel):
    title: RequiredText
    description: RequiredText
    icon: Optional[str] = None


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(ServiceBase):
    order_index: Optional[int] = None


class ServiceResponse(OrderedRecord):
    title: str
    description: str
    icon: Optional[str] = None
