from pydantic import BaseModel
from typing import Optional
from app.core.schemas import OrderedRecord, RequiredText


class PortfolioItemBase(BaseModel):
    title: RequiredText
    category: RequiredText
    description: Optional[str] = None
    image_url: Optional[str] = None
    project_link: Optional[str] = None


class PortfolioItemCreate(PortfolioItemBase):
    pass


class PortfolioItemUpdate(PortfolioItemBase):
    order_index: Optional[int] = None


class PortfolioItemResponse(OrderedRecord):
    title: str
    category: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    project_link: Optional[str] = None
