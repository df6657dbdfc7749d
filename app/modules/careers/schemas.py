from pydantic import BaseModel
from typing import Optional, Literal
from app.core.schemas import OrderedRecord, RequiredText

JobType = Literal["Full-time", "Part-time", "Contract"]


class JobListingBase(BaseModel):
    title: RequiredText
    location: RequiredText
    job_type: JobType = "Full-time"
    description: RequiredText
    is_active: bool = True


class JobListingCreate(JobListingBase):
    pass


class JobListingUpdate(JobListingBase):
    order_index: Optional[int] = None


class JobListingResponse(OrderedRecord):
    title: str
    location: str
    job_type: str
    description: str
    is_active: bool = True
