from typing import List

from app.core.collection_service import CollectionService
from app.modules.careers.schemas import JobListingResponse


class CareerService(CollectionService):
    table = "job_listings"
    label = "Job listing"
    response_model = JobListingResponse

    def list_items(self, include_inactive: bool = False) -> List[JobListingResponse]:
        items = super().list_items()
        if not include_inactive:
            items = [item for item in items if item.is_active]
        return items
