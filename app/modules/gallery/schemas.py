from pydantic import BaseModel, model_validator
from typing import Optional, Literal
from app.core.schemas import OrderedRecord, RequiredText


class GalleryItemBase(BaseModel):
    type: Literal["image", "video"] = "image"
    src: RequiredText
    video_src: Optional[str] = None
    title: RequiredText
    category: RequiredText
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_video_source(self):
        if self.type == "video" and not (self.video_src or "").strip():
            raise ValueError("video_src is required for video items")
        if self.type == "image":
            self.video_src = None
        return self


class GalleryItemCreate(GalleryItemBase):
    pass


class GalleryItemUpdate(GalleryItemBase):
    order_index: Optional[int] = None


class GalleryItemResponse(OrderedRecord):
    type: str
    src: str
    video_src: Optional[str] = None
    title: str
    category: str
    description: Optional[str] = None
